"""
Request payload factories. Each returns a valid body; keyword overrides replace fields.
"""


def make_job_notification(**overrides) -> dict:
    payload = {
        "email": "hr@acme.com",
        "companyName": "Acme Corporation",
        "aboutCompany": "Acme builds software for logistics companies worldwide.",
        "correspondenceAddress": "42 Industrial Estate, Pune, Maharashtra",
        "dateOfEstablishment": "2005-06-01",
        "numberOfEmployees": 1200,
        "socialMediaLink": "",
        "website": "https://www.acme.com",
        "typeOfOrganization": "Private",
        "mncHeadOffice": "",
        "natureOfBusiness": ["IT/Software"],
        "headHRName": "Neha Kapoor",
        "headHRContact": "9876543210",
        "headHREmail": "neha@acme.com",
        "firstContactName": "Rahul Verma",
        "firstContactEmail": "rahul@acme.com",
        "firstContactPhone": "9876543211",
        "secondContactName": "Anita Desai",
        "secondContactEmail": "anita@acme.com",
        "secondContactPhone": "+91 98765 43212",
        "jobProfile": "Software Engineering",
        "jobTitle": "Graduate Engineer Trainee",
        "jobDescription": "Design, build and maintain backend services for our platform.",
        "minHires": 5,
        "expectedHires": 10,
        "jobLocation": "Pune",
        "requiredSkills": "Python, SQL, data structures",
        "eligibleDegrees": ["B. Tech(4 years)"],
        "eligibleBTechDepartments": ["Computer Science & Engineering", "Information Technology"],
        "eligibleMTechDepartments": ["Not Applicable"],
        "eligiblePhDDepartments": ["Not Applicable"],
        "jobDesignationBTech": "Software Engineer",
        "jobDescBTech": "Backend development on the core platform team.",
        "jobDesignationMTech": "Not Applicable",
        "jobDescMTech": "No openings for M.Tech this season.",
        "jobDesignationPhD": "Not Applicable",
        "jobDescPhD": "No openings for PhD this season.",
        "cgpaCutoff": "7.0",
        "backlogEligibility": "No",
        "modeOfSelection": "Virtual",
        "selectionRounds": ["Aptitude Test", "Personal Interview", "HR Round"],
        "totalRounds": 3,
        "syllabus": "",
    }
    payload.update(overrides)
    return payload


def make_course_feedback(**overrides) -> dict:
    payload = {
        "studentId": "21CS001",
        "studentName": "Priya Sharma",
        "email": "priya@student.edu",
        "department": "Computer Science & Engineering",
        "semester": "5",
        "degreeProgram": "B.Tech",
        "academicYear": "2024-25",
        "courseCode": "CS301",
        "courseName": "Database Systems",
        "facultyName": "Dr. Meera Rao",
        "ratingTeaching": 5,
        "ratingContent": 4,
        "ratingEvaluation": 4,
        "ratingFacilities": 3,
        "ratingOverall": 4,
        "strengths": "Clear explanations with practical examples.",
        "improvements": "More lab sessions on query optimisation.",
    }
    payload.update(overrides)
    return payload


def make_placement_feedback(**overrides) -> dict:
    payload = {
        "studentEmail": "arjun@student.edu",
        "studentName": "Arjun Mehta",
        "enrollmentNumber": "EN2021CS042",
        "branch": "Computer Science & Engineering",
        "semester": "7th",
        "academicYear": "2024-25",
        "companyName": "Acme Corporation",
        "positionApplied": "Graduate Engineer Trainee",
        "overallExperience": 4,
        "recruitmentProcess": 4,
        "companyReputationRating": 5,
        "companyWorkCultureRating": 4,
        "recruitmentProcessTransparency": 3,
        "communicationQuality": 4,
        "technicalInterviewDifficulty": "Moderate",
        "technicalInterviewQuality": 4,
        "hrInterviewExperience": 5,
        "interviewerBehavior": 5,
        "collegePreparationSupport": 3,
        "placementCellSupport": 4,
        "feedbackReceivedFromCompany": "No",
        "offerStatus": "Pending",
        "strengths": "Well organised online assessment.",
        "improvements": "Share results sooner after the interviews.",
        "adviceForJuniors": "Practise data structures and revise your projects well.",
        "wouldRecommend": "Recommend",
        "canBeContacted": "No",
    }
    payload.update(overrides)
    return payload


