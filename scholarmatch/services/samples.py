"""Canned records returned by the mock services."""

import copy

SAMPLE_RESUME = {
    "name": "Dr. Sarah Johnson",
    "email": "sarah.johnson@email.com",
    "phone": "+1 (555) 123-4567",
    "summary": "Experienced data scientist with expertise in machine learning and AI research",
    "skills": [
        "Machine Learning",
        "Python",
        "Data Analysis",
        "Research",
        "Statistics",
        "Deep Learning",
        "TensorFlow",
        "PyTorch",
    ],
    "education": [
        {"degree": "Ph.D. in Computer Science", "institution": "Stanford University", "year": "2020", "gpa": "3.9"},
        {"degree": "M.S. in Data Science", "institution": "MIT", "year": "2016", "gpa": "3.8"},
    ],
    "experience": [
        {
            "title": "Senior Data Scientist",
            "company": "Tech Corp",
            "duration": "2020 - Present",
            "description": "Led machine learning initiatives and research projects, "
                           "developed predictive models for business intelligence",
            "skills": ["Python", "Machine Learning", "Team Leadership", "Data Analysis"],
        },
        {
            "title": "Research Assistant",
            "company": "Stanford AI Lab",
            "duration": "2018 - 2020",
            "description": "Conducted research in natural language processing and published 5 peer-reviewed papers",
            "skills": ["NLP", "Research", "Python", "Academic Writing"],
        },
    ],
    "certifications": ["AWS Machine Learning Specialty", "Google Cloud Professional ML Engineer"],
    "languages": ["English (Native)", "Spanish (Conversational)", "Python (Expert)"],
}

SAMPLE_PROFILE = {
    "name": "Dr. Sarah Johnson",
    "affiliation": "Stanford University, Computer Science Department",
    "email": "sarah.johnson@stanford.edu",
    "interests": ["Machine Learning", "Natural Language Processing", "AI Ethics", "Healthcare AI", "Deep Learning"],
    "publications": [
        {
            "id": "pub1",
            "title": "Deep Learning Approaches for Natural Language Understanding in Healthcare",
            "authors": "S. Johnson, M. Chen, R. Williams, K. Zhang",
            "year": "2023",
            "citations": 45,
            "venue": "Nature Machine Intelligence",
            "url": "https://example.com/paper1",
        },
        {
            "id": "pub2",
            "title": "Machine Learning in Healthcare: A Comprehensive Survey and Future Directions",
            "authors": "S. Johnson, A. Smith, K. Brown, L. Davis",
            "year": "2022",
            "citations": 128,
            "venue": "Journal of Medical Internet Research",
            "url": "https://example.com/paper2",
        },
        {
            "id": "pub3",
            "title": "Ethical AI: Principles and Practices for Responsible Machine Learning",
            "authors": "S. Johnson, L. Davis, M. Thompson",
            "year": "2021",
            "citations": 89,
            "venue": "AI & Society",
            "url": "https://example.com/paper3",
        },
        {
            "id": "pub4",
            "title": "Federated Learning for Privacy-Preserving Healthcare Analytics",
            "authors": "S. Johnson, R. Kumar, P. Martinez",
            "year": "2021",
            "citations": 67,
            "venue": "IEEE Transactions on Medical Imaging",
            "url": "https://example.com/paper4",
        },
    ],
    "totalCitations": 1247,
    "hIndex": 18,
    "i10Index": 12,
    "coauthors": [
        {"name": "Dr. Michael Chen", "affiliation": "Stanford University", "collaborations": 8},
        {"name": "Dr. Lisa Davis", "affiliation": "MIT", "collaborations": 5},
        {"name": "Dr. Robert Williams", "affiliation": "UC Berkeley", "collaborations": 3},
    ],
    "recentActivity": [
        {
            "type": "citation",
            "description": "Your paper 'Deep Learning Approaches...' was cited 3 times this week",
            "date": "2024-01-15",
        },
        {
            "type": "collaboration",
            "description": "New collaboration started with Dr. Chen on AI Ethics project",
            "date": "2024-01-10",
        },
    ],
}

SAMPLE_PROJECTS = [
    {
        "id": "proj_1",
        "title": "AI-Powered Healthcare Diagnostics Platform",
        "description": "Develop machine learning models for early disease detection using medical imaging data.",
        "longDescription": "Work with a multidisciplinary team of doctors, engineers, and researchers to "
                           "develop machine learning models that detect diseases from medical images.",
        "skillsRequired": ["Machine Learning", "Python", "Deep Learning", "Medical Imaging", "TensorFlow"],
        "skillsPreferred": ["Computer Vision", "PyTorch", "Medical Knowledge", "Research Experience"],
        "matchingReason": "Your background in machine learning and healthcare AI research aligns with "
                          "this project's requirements.",
        "matchScore": 95,
        "collaborationType": "Research",
        "difficulty": "Advanced",
        "duration": "12-18 months",
        "commitment": "20-30 hours/week",
        "organization": {
            "name": "Stanford Medical AI Lab",
            "type": "Academic Institution",
            "location": "Stanford, CA",
            "website": "https://med.stanford.edu/ai",
        },
        "contact": {"name": "Dr. Jennifer Martinez", "email": "j.martinez@stanford.edu", "role": "Principal Investigator"},
        "deadline": "2024-02-15",
        "compensation": "Competitive stipend + publication opportunities",
        "tags": ["Healthcare", "AI", "Research", "High Impact"],
        "requirements": [
            "PhD in Computer Science or related field",
            "3+ years experience in machine learning",
            "Experience with medical imaging preferred",
        ],
        "benefits": [
            "Work with world-class researchers",
            "Access to cutting-edge computing resources",
            "Publication opportunities in top venues",
        ],
        "isBookmarked": False,
        "applicationStatus": "not_applied",
    },
    {
        "id": "proj_2",
        "title": "Natural Language Processing for Legal Document Analysis",
        "description": "Build NLP models to analyze and categorize legal documents, extract key information, "
                       "and identify potential compliance issues.",
        "longDescription": "Join a legal tech startup to develop NLP solutions that change how legal "
                           "professionals work with documents.",
        "skillsRequired": ["Natural Language Processing", "Python", "Machine Learning", "Text Mining", "Legal Tech"],
        "skillsPreferred": ["Transformers", "BERT", "Legal Knowledge", "API Development"],
        "matchingReason": "Your expertise in NLP and text analysis, combined with your research background, "
                          "fits this legal technology project.",
        "matchScore": 88,
        "collaborationType": "Industry",
        "difficulty": "Intermediate",
        "duration": "6-12 months",
        "commitment": "Full-time",
        "organization": {
            "name": "LegalAI Solutions",
            "type": "Technology Startup",
            "location": "San Francisco, CA (Remote OK)",
            "website": "https://legalai.com",
        },
        "contact": {"name": "Sarah Chen", "email": "sarah@legalai.com", "role": "CTO"},
        "deadline": "2024-01-30",
        "compensation": "$120,000 - $150,000 + equity",
        "tags": ["NLP", "Legal Tech", "Startup", "Remote"],
        "requirements": [
            "MS/PhD in Computer Science or related field",
            "Strong background in NLP and machine learning",
            "Experience with production ML systems",
        ],
        "benefits": [
            "Competitive salary and equity package",
            "Remote work flexibility",
            "Professional development budget",
        ],
        "isBookmarked": True,
        "applicationStatus": "not_applied",
    },
    {
        "id": "proj_3",
        "title": "Open Dataset Curation for Climate Research",
        "description": "Clean, document and publish climate observation datasets for use by partner universities.",
        "skillsRequired": ["Python", "Data Analysis", "Statistics"],
        "skillsPreferred": ["Pandas", "Scientific Writing"],
        "matchingReason": "Your data analysis and statistics experience suits this curation effort.",
        "matchScore": 72,
        "collaborationType": "Academic",
        "difficulty": "Beginner",
        "duration": "3-6 months",
        "commitment": "10 hours/week",
        "organization": {
            "name": "MIT Climate Data Initiative",
            "type": "Academic Institution",
            "location": "Boston, MA",
        },
        "contact": {"name": "Dr. Lisa Davis", "email": "ldavis@mit.edu", "role": "Program Lead"},
        "tags": ["Climate", "Open Data", "Academic"],
        "requirements": ["Familiarity with Python data tooling"],
        "benefits": ["Co-authorship on the dataset paper"],
        "isBookmarked": False,
        "applicationStatus": "not_applied",
    },
    {
        "id": "proj_4",
        "title": "Federated Learning Infrastructure for Hospital Networks",
        "description": "Design privacy-preserving training pipelines that let hospitals share models without sharing data.",
        "skillsRequired": ["Deep Learning", "PyTorch", "Distributed Systems"],
        "skillsPreferred": ["Differential Privacy", "Kubernetes"],
        "matchingReason": "Your federated learning publication makes this a natural follow-on.",
        "matchScore": 91,
        "collaborationType": "Industry",
        "difficulty": "Advanced",
        "duration": "12-18 months",
        "commitment": "Full-time",
        "organization": {
            "name": "MedSecure Analytics",
            "type": "Healthcare Technology",
            "location": "New York, NY",
        },
        "contact": {"name": "Dr. Raj Kumar", "email": "raj@medsecure.io", "role": "Head of Research"},
        "deadline": "2024-03-01",
        "compensation": "$140,000 - $170,000",
        "tags": ["Healthcare", "Privacy", "Infrastructure"],
        "requirements": ["Experience training models at scale"],
        "benefits": ["Conference travel budget"],
        "isBookmarked": False,
        "applicationStatus": "not_applied",
    },
]

AVAILABLE_FACETS = {
    "availableSkills": ["Machine Learning", "Python", "NLP", "Deep Learning"],
    "availableOrganizations": ["Stanford", "MIT", "Google", "Microsoft"],
    "availableLocations": ["San Francisco", "New York", "Boston", "Remote"],
}


def fresh(record):
    """Deep copy so callers can never mutate the canned data."""
    return copy.deepcopy(record)
