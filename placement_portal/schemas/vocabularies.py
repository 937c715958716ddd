"""
Fixed vocabularies used by the forms and the validators.

The form layer fetches these through GET /api/forms/job-notification/options
so dropdowns and server-side checks never drift apart.
"""

# ============================================================
# JOB NOTIFICATION
# ============================================================

ORGANIZATION_TYPES = [
    "Private",
    "MNC(Indian Origin)",
    "MNC(Foreign Origin)",
    "Government",
    "PSUs",
    "NGO",
    "STARTUP",
    "Other",
]

# mncHeadOffice is only required for these
MNC_ORGANIZATION_TYPES = ["MNC(Indian Origin)", "MNC(Foreign Origin)"]

NATURE_OF_BUSINESS = [
    "Core Engineering & technology", "Analytics", "IT/Software", "Oil & Gas",
    "Data Science", "Cyber Security", "Finance & Consulting", "Management",
    "Teaching/Research", "Media", "E-Commerce", "Construction",
    "Design", "Manufacturing", "Infrastructure", "Other",
]

ELIGIBLE_DEGREES = ["B. Tech(4 years)", "B.Arch(5 years)", "M.Tech (2 years)", "MBA", "PhD"]

BTECH_DEPARTMENTS = [
    "All", "Civil Engineering", "Mechanical Engineering", "Electrical Engineering",
    "Electronics & Communication Engineering", "Computer Science & Engineering",
    "Information Technology", "Chemical Technology (Leather Technology)",
    "Biomedical & Robotic Engineering", "Electrical & Electronics Engineering",
    "Civil Engineering with Computer Application", "Computer Science & Engineering (AI)",
    "Fire Technology & Safety", "Computer Science & Engineering (Cyber Security)",
    "Aeronautical Engineering", "Food Processing & Preservation",
    "Computer Science & Engineering (IoT)",
    "Electronics & Communication Engineering (Advance Communication Technology)",
    "Computer Science & Engineering(AI & ML)", "Chemical Engineering",
    "Computer Science & Engineering(Data Science)",
    "Electronics Engineering (VLSI Design & Technology)",
    "Mining Engineering", "3-D Animation & Graphics", "Mechanical & Smart Manufacturing",
    "Mechatronics Engineering", "Computer Science & Engineering (Networks)",
    "Computer Science & Engg (IOT & Cyber Security including Block Chain Technology)",
    "Robotics and Automation", "Instrumentation Engineering", "Agricultural Engineering",
    "Waste Management", "Petrochemical Engineering", "Chemical Engineering (Plastic & Polymer)",
    "Marine Engineering", "B.Arch", "Not Applicable",
]

MTECH_DEPARTMENTS = [
    "All", "Machine Design", "Thermal Engineering", "Manufacturing Technology",
    "Energy System and Management", "Manufacturing Engineering",
    "Advanced Electronics and Communication Engineering", "VLSI Design",
    "Signal Processing and VLSI Technology", "Micro Electronics & VLSI Technology",
    "Advance Communication Technology", "Electronics and Communication Engineering",
    "Geotechnical Engineering", "Transportation Engineering", "Structural Engineering",
    "Computer Science & Engineering", "Cyber Security", "Electrical Energy Systems",
    "Power System", "Electrical Power System", "Geoinformatics", "MBA", "Not Applicable",
]

PHD_DEPARTMENTS = [
    "All", "Civil Engineering", "Computer Science and Engineering",
    "Electrical Engineering", "Electronics and Communication Engineering",
    "Mechanical Engineering", "Not Applicable",
]

BACKLOG_ELIGIBILITY = ["Yes", "No"]

SELECTION_MODES = ["Virtual", "Campus Visit", "Hybrid"]

SELECTION_ROUNDS = [
    "Pre-Placement Talk", "Aptitude Test", "Technical Test(Online Assessment)",
    "Personal Interview", "HR Round", "Group Discussion", "Psychometric Test",
    "Medical Test", "Other",
]

JOB_STATUSES = ["Pending", "Under Review", "Approved", "Rejected", "On Hold"]

# ============================================================
# COURSE FEEDBACK
# ============================================================

FEEDBACK_DEPARTMENTS = [
    "Civil Engineering", "Mechanical Engineering", "Electrical Engineering",
    "Electronics & Communication Engineering", "Computer Science & Engineering",
    "Information Technology", "Chemical Technology", "Biomedical Engineering",
    "Aeronautical Engineering", "Mining Engineering", "Agricultural Engineering",
    "Other",
]

FEEDBACK_SEMESTERS = ["1", "2", "3", "4", "5", "6", "7", "8"]

DEGREE_PROGRAMS = ["B.Tech", "B.Arch", "M.Tech", "MBA", "PhD"]

FEEDBACK_ACADEMIC_YEARS = ["2023-24", "2024-25", "2025-26", "2026-27"]

FACILITY_RATINGS = ["Excellent", "Good", "Average", "Poor", "Not Applicable"]

# ============================================================
# PLACEMENT FEEDBACK
# ============================================================

PLACEMENT_BRANCHES = [
    "Computer Science & Engineering",
    "Information Technology",
    "Electronics & Communication Engineering",
    "Electrical Engineering",
    "Mechanical Engineering",
    "Civil Engineering",
    "Chemical Engineering",
    "Biomedical & Robotic Engineering",
    "Fire Technology & Safety",
    "Computer Science & Engineering (AI)",
    "Computer Science & Engineering (Cyber Security)",
    "Computer Science & Engineering (Data Science)",
    "Computer Science & Engineering (IoT)",
    "Electronics Engineering (VLSI Design & Technology)",
    "Mechatronics Engineering",
    "Robotics and Automation",
    "Other",
]

PLACEMENT_SEMESTERS = ["1st", "2nd", "3rd", "4th", "5th", "6th", "7th", "8th"]

PLACEMENT_ACADEMIC_YEARS = ["2023-24", "2024-25", "2025-26"]

INTERVIEW_DIFFICULTIES = ["Easy", "Moderate", "Difficult", "Very Difficult"]

COMPANY_FEEDBACK_OPTIONS = ["Yes - Positive", "Yes - Constructive", "No", "Minimal"]

OFFER_STATUSES = ["Selected", "Rejected", "Pending"]

RECOMMENDATION_OPTIONS = ["Highly Recommend", "Recommend", "Neutral", "Would Not Recommend"]

YES_NO = ["Yes", "No"]


def job_notification_options() -> dict:
    """Vocabulary bundle served to the job notification form."""
    return {
        "typeOfOrganization": ORGANIZATION_TYPES,
        "mncOrganizationTypes": MNC_ORGANIZATION_TYPES,
        "natureOfBusiness": NATURE_OF_BUSINESS,
        "eligibleDegrees": ELIGIBLE_DEGREES,
        "eligibleBTechDepartments": BTECH_DEPARTMENTS,
        "eligibleMTechDepartments": MTECH_DEPARTMENTS,
        "eligiblePhDDepartments": PHD_DEPARTMENTS,
        "backlogEligibility": BACKLOG_ELIGIBILITY,
        "modeOfSelection": SELECTION_MODES,
        "selectionRounds": SELECTION_ROUNDS,
    }
