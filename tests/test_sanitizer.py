from placement_portal.services.sanitizer import sanitize_job_notification, sanitize_string
from tests.payloads import make_job_notification


def test_sanitize_string_collapses_whitespace():
    assert sanitize_string("  Acme \n\t Corp  ") == "Acme Corp"


def test_sanitize_is_idempotent():
    body = make_job_notification(companyName="  Acme   Corporation ", email=" HR@Acme.COM ")
    once = sanitize_job_notification(body)
    assert sanitize_job_notification(once) == once


def test_emails_are_lowercased_and_other_fields_untouched():
    body = make_job_notification(email="HR@Acme.com", firstContactEmail=" Rahul@ACME.com",
                                 jobDescription="Keep   this   spacing as written here ok.")
    clean = sanitize_job_notification(body)
    assert clean["email"] == "hr@acme.com"
    assert clean["firstContactEmail"] == "rahul@acme.com"
    assert clean["jobDescription"] == body["jobDescription"]
    assert clean["natureOfBusiness"] == ["IT/Software"]


def test_input_is_not_mutated():
    body = make_job_notification(companyName="  Acme  ")
    sanitize_job_notification(body)
    assert body["companyName"] == "  Acme  "
