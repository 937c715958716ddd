"""
Job Notification Validator

Six independent section checks whose error maps are merged:
1. Company information
2. HR & contact information
3. Job details
4. Eligibility
5. Role-specific details (B.Tech / M.Tech / PhD)
6. Selection process

Field names are disjoint across sections, so merging never overwrites.
The same functions back POST /job-notifications and the form endpoint.
"""

from datetime import date, datetime
from typing import Tuple

from placement_portal.schemas.vocabularies import (
    ORGANIZATION_TYPES, MNC_ORGANIZATION_TYPES, NATURE_OF_BUSINESS,
    ELIGIBLE_DEGREES, BTECH_DEPARTMENTS, MTECH_DEPARTMENTS, PHD_DEPARTMENTS,
    BACKLOG_ELIGIBILITY, SELECTION_MODES, SELECTION_ROUNDS,
)
from placement_portal.validation.common import (
    Errors, check_text, check_email, check_phone, check_choice,
    check_multi_choice, is_blank, is_valid_url, parse_int,
)


# Upper bounds keep stored counts well inside BSON int64
MAX_HIRES = 1_000_000
MAX_EMPLOYEES = 10_000_000

# Fields a company may change after submission via PUT.
# Workflow fields (status, reviewedBy, reviewNotes) only change through the workflow service.
UPDATABLE_FIELDS = frozenset([
    "aboutCompany", "correspondenceAddress", "dateOfEstablishment", "numberOfEmployees",
    "socialMediaLink", "headHRName", "headHRContact", "headHREmail", "firstContactName",
    "firstContactEmail", "firstContactPhone", "secondContactName", "secondContactEmail",
    "secondContactPhone", "jobProfile", "jobTitle", "jobDescription", "jobLocation",
    "requiredSkills", "jobDesignationBTech", "jobDescBTech", "jobDesignationMTech",
    "jobDescMTech", "jobDesignationPhD", "jobDescPhD", "cgpaCutoff", "syllabus",
])


def _is_valid_date(value) -> bool:
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def validate_company_info(body: dict) -> Errors:
    errors: Errors = {}

    check_email(errors, body, "email", "Valid email is required (e.g., company@domain.com)")

    check_text(errors, body, "companyName", "Company name", min_len=3, max_len=200)
    check_text(errors, body, "aboutCompany", "About company", min_len=20, max_len=2000,
               required_message="About company description is required")
    check_text(errors, body, "correspondenceAddress", "Correspondence address", min_len=10, max_len=500)

    if not is_valid_url(body.get("website")):
        errors["website"] = "Valid website URL is required (e.g., https://www.company.com)"

    social = body.get("socialMediaLink")
    if social and not is_valid_url(social):
        errors["socialMediaLink"] = "Please enter a valid URL"

    check_choice(errors, body, "typeOfOrganization", ORGANIZATION_TYPES,
                 "Valid type of organization is required")

    if body.get("typeOfOrganization") in MNC_ORGANIZATION_TYPES:
        check_text(errors, body, "mncHeadOffice", "MNC head office", max_len=300,
                   required_message="MNC head office location is required")
    else:
        check_text(errors, body, "mncHeadOffice", "MNC head office", max_len=300, required=False)

    check_multi_choice(errors, body, "natureOfBusiness", NATURE_OF_BUSINESS,
                       "Select at least one nature of business",
                       "Invalid nature of business selected")

    # Optional fields
    established = body.get("dateOfEstablishment")
    if established and not _is_valid_date(established):
        errors["dateOfEstablishment"] = "Invalid date format"

    employees = body.get("numberOfEmployees")
    if employees not in (None, ""):
        count = parse_int(employees)
        if count is None or not 1 <= count <= MAX_EMPLOYEES:
            errors["numberOfEmployees"] = f"Number of employees must be between 1 and {MAX_EMPLOYEES:,}"

    return errors


def validate_hr_info(body: dict) -> Errors:
    errors: Errors = {}

    check_text(errors, body, "headHRName", "Head HR name", max_len=150)
    check_phone(errors, body, "headHRContact", "Valid 10-15 digit contact number is required")
    check_email(errors, body, "headHREmail", "Valid Head HR email is required")

    for prefix, label in (("first", "First"), ("second", "Second")):
        check_text(errors, body, f"{prefix}ContactName", f"{label} contact name", max_len=150)
        check_email(errors, body, f"{prefix}ContactEmail", f"Valid {label.lower()} contact email is required")
        check_phone(errors, body, f"{prefix}ContactPhone", f"Valid {label.lower()} contact phone is required")

    return errors


def validate_job_details(body: dict) -> Errors:
    errors: Errors = {}

    check_text(errors, body, "jobProfile", "Job profile", max_len=200)
    check_text(errors, body, "jobTitle", "Job title", max_len=200)
    check_text(errors, body, "jobDescription", "Job description", min_len=30, max_len=2000)

    min_hires = parse_int(body.get("minHires"))
    if min_hires is None or not 0 <= min_hires <= MAX_HIRES:
        min_hires = None
        errors["minHires"] = f"Minimum hires must be a whole number between 0 and {MAX_HIRES:,}"

    expected_hires = parse_int(body.get("expectedHires"))
    if expected_hires is None or not 0 <= expected_hires <= MAX_HIRES:
        errors["expectedHires"] = f"Expected hires must be a whole number between 0 and {MAX_HIRES:,}"
    elif min_hires is not None and expected_hires < min_hires:
        errors["expectedHires"] = "Expected hires must be greater than or equal to minimum hires"

    check_text(errors, body, "jobLocation", "Job location", max_len=300)
    check_text(errors, body, "requiredSkills", "Required skills", max_len=1500,
               required_message="Required skills are required")

    return errors


def validate_eligibility(body: dict) -> Errors:
    errors: Errors = {}

    check_multi_choice(errors, body, "eligibleDegrees", ELIGIBLE_DEGREES,
                       "Select at least one eligible degree", "Invalid degree(s) selected")
    check_multi_choice(errors, body, "eligibleBTechDepartments", BTECH_DEPARTMENTS,
                       "Select at least one B.Tech department", "Invalid B.Tech department(s) selected")
    check_multi_choice(errors, body, "eligibleMTechDepartments", MTECH_DEPARTMENTS,
                       "Select at least one M.Tech department", "Invalid M.Tech department(s) selected")
    check_multi_choice(errors, body, "eligiblePhDDepartments", PHD_DEPARTMENTS,
                       "Select at least one PhD department", "Invalid PhD department(s) selected")

    return errors


def validate_role_specific(body: dict) -> Errors:
    errors: Errors = {}

    for suffix, label in (("BTech", "B.Tech"), ("MTech", "M.Tech"), ("PhD", "PhD")):
        check_text(errors, body, f"jobDesignation{suffix}", f"{label} job designation", max_len=200)
        check_text(errors, body, f"jobDesc{suffix}", f"{label} job description", min_len=20, max_len=1000)

    return errors


def validate_selection_process(body: dict) -> Errors:
    errors: Errors = {}

    check_text(errors, body, "cgpaCutoff", "CGPA cutoff", max_len=100)

    check_choice(errors, body, "backlogEligibility", BACKLOG_ELIGIBILITY,
                 "Backlog eligibility must be Yes or No")
    check_choice(errors, body, "modeOfSelection", SELECTION_MODES,
                 "Valid mode of selection is required (Virtual, Campus Visit, or Hybrid)")

    total_rounds = parse_int(body.get("totalRounds"))
    if total_rounds is None or not 1 <= total_rounds <= 10:
        errors["totalRounds"] = "Total rounds must be between 1 and 10"

    check_multi_choice(errors, body, "selectionRounds", SELECTION_ROUNDS,
                       "Select at least one selection round", "Invalid selection round(s) selected")
    if "selectionRounds" not in errors and total_rounds is not None \
            and len(body["selectionRounds"]) > total_rounds:
        errors["selectionRounds"] = "Number of selection rounds cannot exceed total rounds"

    check_text(errors, body, "syllabus", "Syllabus", max_len=2000, required=False)

    return errors


SECTION_VALIDATORS = (
    validate_company_info,
    validate_hr_info,
    validate_job_details,
    validate_eligibility,
    validate_role_specific,
    validate_selection_process,
)


def validate_job_notification(body) -> Tuple[bool, Errors]:
    """
    Run every section validator over a submission.

    Returns:
        (is_valid, errors) - errors is empty exactly when is_valid is True
    """
    if not isinstance(body, dict):
        return False, {"body": "Request body must be a JSON object"}

    errors: Errors = {}
    for section in SECTION_VALIDATORS:
        errors.update(section(body))
    return not errors, errors


def validate_job_notification_update(current: dict, updates) -> Tuple[bool, Errors]:
    """
    Validate a PUT body against the stored record.

    Keys outside UPDATABLE_FIELDS fail the whole request. Allowed keys are
    checked by merging them over the current record and re-running the
    field rules; only errors on the updated keys are reported.
    """
    if not isinstance(updates, dict):
        return False, {"body": "Request body must be a JSON object"}
    if not updates:
        return False, {"fields": "No fields to update"}

    disallowed = sorted(set(updates) - UPDATABLE_FIELDS)
    if disallowed:
        return False, {"fields": f"These fields cannot be updated: {', '.join(disallowed)}"}

    merged = {**current, **updates}
    _, all_errors = validate_job_notification(merged)
    errors = {field: message for field, message in all_errors.items() if field in updates}
    return not errors, errors
