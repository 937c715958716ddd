"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Job notification bodies are validated field-by-field by
placement_portal.validation.job_notification (the forms need a message per
field, and a malformed payload must never raise). Feedback bodies are
pydantic models; their errors are flattened into the same map shape.
"""

from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from placement_portal.schemas.vocabularies import (
    FEEDBACK_DEPARTMENTS, FEEDBACK_SEMESTERS, DEGREE_PROGRAMS, FEEDBACK_ACADEMIC_YEARS,
    FACILITY_RATINGS, PLACEMENT_BRANCHES, PLACEMENT_SEMESTERS, PLACEMENT_ACADEMIC_YEARS,
    INTERVIEW_DIFFICULTIES, COMPANY_FEEDBACK_OPTIONS, OFFER_STATUSES,
    RECOMMENDATION_OPTIONS, YES_NO,
)
from placement_portal.validation.common import is_valid_email


# ============================================================
# ENUM TYPES
# ============================================================

Department = Literal[tuple(FEEDBACK_DEPARTMENTS)]
Semester = Literal[tuple(FEEDBACK_SEMESTERS)]
DegreeProgram = Literal[tuple(DEGREE_PROGRAMS)]
AcademicYear = Literal[tuple(FEEDBACK_ACADEMIC_YEARS)]
FacilityRating = Literal[tuple(FACILITY_RATINGS)]

Branch = Literal[tuple(PLACEMENT_BRANCHES)]
PlacementSemester = Literal[tuple(PLACEMENT_SEMESTERS)]
PlacementAcademicYear = Literal[tuple(PLACEMENT_ACADEMIC_YEARS)]
InterviewDifficulty = Literal[tuple(INTERVIEW_DIFFICULTIES)]
CompanyFeedbackOption = Literal[tuple(COMPANY_FEEDBACK_OPTIONS)]
OfferStatus = Literal[tuple(OFFER_STATUSES)]
RecommendationOption = Literal[tuple(RECOMMENDATION_OPTIONS)]
YesNo = Literal[tuple(YES_NO)]


def _reject_bool(value):
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        raise ValueError("Rating must be a whole number between 1 and 5")
    return value


Rating = Annotated[int, BeforeValidator(_reject_bool), Field(ge=1, le=5)]


def _normalise_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("Invalid email format")
    return value.lower()


# ============================================================
# COURSE FEEDBACK
# ============================================================

class CourseFeedbackCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Student
    studentId: str = Field(..., min_length=1, max_length=20)
    studentName: str = Field(..., min_length=3, max_length=100)
    email: str = Field(..., max_length=100)
    department: Department
    semester: Semester
    degreeProgram: DegreeProgram
    academicYear: AcademicYear

    # Course
    courseCode: str = Field(..., min_length=1, max_length=20)
    courseName: str = Field(..., min_length=1, max_length=100)
    facultyName: str = Field(..., min_length=1, max_length=100)

    # Ratings (numeric strings from <select> are coerced)
    ratingTeaching: Rating
    ratingContent: Rating
    ratingEvaluation: Rating
    ratingFacilities: Rating
    ratingOverall: Rating

    strengths: str = Field(..., min_length=20, max_length=1000)
    improvements: str = Field(..., min_length=20, max_length=1000)
    suggestions: str = Field("", max_length=1000)

    # Campus facilities
    placementSupport: FacilityRating = "Not Applicable"
    libraryFacilities: FacilityRating = "Not Applicable"
    labFacilities: FacilityRating = "Not Applicable"
    hostelFacilities: FacilityRating = "Not Applicable"
    sportsFacilities: FacilityRating = "Not Applicable"
    careerGuidance: FacilityRating = "Not Applicable"
    extracurricular: FacilityRating = "Not Applicable"
    campusEnvironment: FacilityRating = "Not Applicable"
    adminSupport: FacilityRating = "Not Applicable"

    additionalComments: str = Field("", max_length=1500)
    recommendImprovements: List[str] = []
    willingToParticipate: bool = False
    contactForFollowup: bool = False

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _normalise_email(v)


# ============================================================
# PLACEMENT FEEDBACK
# ============================================================

class PlacementFeedbackCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Student
    studentEmail: str = Field(..., max_length=100)
    studentName: str = Field(..., min_length=3, max_length=100)
    enrollmentNumber: str = Field(..., min_length=1, max_length=30)
    branch: Branch
    semester: PlacementSemester
    academicYear: PlacementAcademicYear

    # Recruitment
    companyName: str = Field(..., min_length=1, max_length=200)
    positionApplied: str = Field(..., min_length=1, max_length=150)
    overallExperience: Rating
    recruitmentProcess: Rating

    # Company
    companyReputationRating: Rating
    companyWorkCultureRating: Rating
    recruitmentProcessTransparency: Rating
    communicationQuality: Rating

    # Interview
    technicalInterviewDifficulty: InterviewDifficulty
    technicalInterviewQuality: Rating
    hrInterviewExperience: Rating
    interviewerBehavior: Rating

    # Support
    collegePreparationSupport: Rating
    placementCellSupport: Rating
    feedbackReceivedFromCompany: CompanyFeedbackOption

    # Offer (package/joining date are checked conditionally on offerStatus)
    offerStatus: OfferStatus
    packageOffered: str = Field("", max_length=100)
    joiningDate: str = Field("", max_length=50)

    strengths: str = Field(..., min_length=20, max_length=1000)
    improvements: str = Field(..., min_length=20, max_length=1000)
    adviceForJuniors: str = Field(..., min_length=30, max_length=1500)
    wouldRecommend: RecommendationOption
    additionalComments: str = Field("", max_length=1500)

    # Contact (alternatePhone/linkedinProfile are checked conditionally)
    canBeContacted: YesNo
    alternatePhone: str = ""
    linkedinProfile: str = ""

    @field_validator("studentEmail")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _normalise_email(v)


# ============================================================
# WORKFLOW
# ============================================================

class ReviewAction(BaseModel):
    """Body of PATCH approve / reject / hold. Blank checks live in the workflow service."""
    model_config = ConfigDict(extra="ignore")

    reviewerName: Optional[str] = None
    reviewNotes: Optional[str] = None
