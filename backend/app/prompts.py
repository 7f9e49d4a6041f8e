# backend/app/prompts.py
from typing import Iterable

ANALYSIS_TEMPLATE = """
You are a world-class HR professional and an expert resume screener. Analyze the provided resume against the given job description. Provide a detailed, structured analysis in JSON format.

The JSON object must have the following keys:
- "jobTitle": (string) The job title, extracted from the job description.
- "candidateName": (string) The candidate's full name, if found.
- "suitabilityScore": (number) A score from 0 to 100 indicating how well the resume matches the job description.
- "matchSummary": (string) A concise one-paragraph summary explaining the score and the candidate's fit.
- "strengths": (array of strings) Key strengths and qualifications that align with the job description.
- "potentialGaps": (array of strings) Potential gaps or missing qualifications.
- "suggestedQuestions": (array of strings) 2-3 insightful interview questions to ask the candidate.

Job Description:
---
{job_description}
---
Resume:
---
{resume_text}
---

Provide your analysis in the specified JSON format."""

ENHANCE_TEMPLATE = """You are an expert recruiter and copywriter. Enhance the following job description to make it more appealing, clear, and inclusive for top candidates. Ensure it effectively outlines responsibilities and qualifications and sells the company culture. Return only the enhanced job description text, without any preamble.

Job Description:
---
{job_description}"""

OUTREACH_EMAIL_TEMPLATE = """You are a friendly and professional recruiter. Draft a personalized outreach email to "{candidate_name}" inviting them to an interview for the "{job_title}" position. Reference their specific strengths, such as "{strengths}", to show you've read their resume carefully. Keep the tone enthusiastic and professional. Return only the email body as plain text."""

# Keys the analysis prompt asks the model to return.
ANALYSIS_KEYS = (
    "jobTitle",
    "candidateName",
    "suitabilityScore",
    "matchSummary",
    "strengths",
    "potentialGaps",
    "suggestedQuestions",
)


def analysis_prompt(job_description: str, resume_text: str) -> str:
    return ANALYSIS_TEMPLATE.format(job_description=job_description, resume_text=resume_text)


def enhance_prompt(job_description: str) -> str:
    return ENHANCE_TEMPLATE.format(job_description=job_description)


def outreach_email_prompt(candidate_name: str, job_title: str, strengths: Iterable[str]) -> str:
    """Plain-text email request for one candidate, quoting their strengths back."""
    return OUTREACH_EMAIL_TEMPLATE.format(
        candidate_name=candidate_name,
        job_title=job_title,
        strengths=", ".join(strengths),
    )
