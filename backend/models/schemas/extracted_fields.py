"""Structured fields pulled out of free-form job description markdown."""

from pydantic import BaseModel


class ExtractedFields(BaseModel):
    """Fixed-shape record. Every field is a string; ``""`` when not found."""
    job_title: str = ""
    company_name: str = ""
    role_level: str = ""
    location: str = ""
    responsibilities: str = ""
    required_qualifications: str = ""
    preferred_qualifications: str = ""
    compensation_range: str = ""
    benefits: str = ""
    tech_stack: str = ""
    role_overview: str = ""
    about_company: str = ""
