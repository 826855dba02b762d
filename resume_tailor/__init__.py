"""Resume Tailor: tailor an existing resume to a job posting with an LLM."""

__version__ = "0.1.0"
