"""Static job catalog used for suggestions"""
from __future__ import annotations
from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class SuggestedJob(BaseModel):
    """Catalog entry; ``match_percentage`` is filled in per request on a copy"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    company: str
    location: str
    salary: str
    description: str
    required_skills: List[str] = Field(default_factory=list, alias="requiredSkills")
    url: str
    posted_date: str = Field(..., alias="postedDate")
    match_percentage: int = Field(0, alias="matchPercentage")


def _job(id, title, company, location, salary, description, skills, posted) -> SuggestedJob:
    return SuggestedJob(
        id=id,
        title=title,
        company=company,
        location=location,
        salary=salary,
        description=description,
        required_skills=list(skills),
        url=f"https://example.com/job/{id}",
        posted_date=posted,
    )


JOB_CATALOG: Tuple[SuggestedJob, ...] = (
    # Frontend
    _job("1", "Senior Frontend Developer", "TechCorp Inc.", "San Francisco, CA", "$130,000 - $170,000",
         "Lead frontend development for our next-generation SaaS platform. Work with React, TypeScript, "
         "and modern web technologies to create exceptional user experiences.",
         ("React", "TypeScript", "JavaScript", "CSS", "HTML", "Redux"), "2024-01-15"),
    _job("2", "Full Stack Engineer", "StartupXYZ", "Remote", "$110,000 - $150,000",
         "Join our dynamic team building scalable web applications. Work across the full stack with "
         "React, Node.js, and cloud technologies.",
         ("React", "Node.js", "JavaScript", "AWS", "MongoDB", "Docker"), "2024-01-12"),
    _job("3", "React Developer", "WebSolutions Ltd", "New York, NY", "$95,000 - $125,000",
         "Build modern, responsive web applications with a focus on performance and user experience. "
         "Work with the latest React ecosystem.",
         ("React", "JavaScript", "CSS", "Redux", "Git", "Webpack"), "2024-01-10"),
    # Backend
    _job("4", "Senior Backend Engineer", "Enterprise Solutions", "Austin, TX", "$125,000 - $165,000",
         "Design and implement scalable microservices architecture. Lead backend development using "
         "Java, Spring Boot, and cloud technologies.",
         ("Java", "Spring Boot", "Microservices", "Kubernetes", "PostgreSQL", "AWS"), "2024-01-08"),
    _job("5", "Java Software Engineer", "FinTech Solutions", "Chicago, IL", "$105,000 - $140,000",
         "Develop high-performance financial systems using Java and Spring framework. Work on "
         "mission-critical applications handling millions of transactions.",
         ("Java", "Spring Boot", "REST APIs", "PostgreSQL", "Redis", "Jenkins"), "2024-01-05"),
    # Data science
    _job("6", "Senior Data Scientist", "AI Innovations", "Seattle, WA", "$140,000 - $180,000",
         "Lead machine learning initiatives and build predictive models. Work with large datasets and "
         "cutting-edge ML technologies.",
         ("Python", "Machine Learning", "TensorFlow", "PyTorch", "SQL", "AWS"), "2024-01-14"),
    _job("7", "Machine Learning Engineer", "DataTech Corp", "Boston, MA", "$120,000 - $160,000",
         "Deploy and scale ML models in production. Work with MLOps, cloud platforms, and modern data "
         "infrastructure.",
         ("Python", "TensorFlow", "Kubernetes", "Docker", "AWS", "MLOps"), "2024-01-11"),
    _job("8", "Data Analyst", "Analytics Plus", "Denver, CO", "$75,000 - $95,000",
         "Analyze business data and create insights through statistical analysis and visualization. "
         "Work with SQL, Python, and BI tools.",
         ("Python", "SQL", "Pandas", "NumPy", "Tableau", "R"), "2024-01-09"),
    # DevOps / cloud
    _job("9", "DevOps Engineer", "CloudFirst Inc", "Remote", "$115,000 - $145,000",
         "Build and maintain CI/CD pipelines, manage cloud infrastructure, and ensure system reliability "
         "and scalability.",
         ("Docker", "Kubernetes", "AWS", "Jenkins", "Terraform", "Git"), "2024-01-13"),
    _job("10", "Cloud Solutions Architect", "Enterprise Cloud", "Dallas, TX", "$150,000 - $190,000",
         "Design cloud architecture solutions for enterprise clients. Lead cloud migration projects and "
         "optimize infrastructure costs.",
         ("AWS", "Azure", "Kubernetes", "Terraform", "Microservices", "Docker"), "2024-01-07"),
)
