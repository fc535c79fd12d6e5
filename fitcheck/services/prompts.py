from __future__ import annotations

from fitcheck.ai.types import ChatMessage

SCORING_SYSTEM_PROMPT = """You are a recruiting assistant.
Given a RESUME and a JOB DESCRIPTION (JD), you will:
1) Score the candidate's fit on a 1-5 scale (whole or half points; 5 = excellent fit).
2) If the score is 4 or higher, return 4-5 bullet points highlighting the strengths most relevant to the JD, written in a neutral, client-facing tone.
3) If the score is below 4, return an empty array for bullets.
4) Be concise and leave out personal data.

Return STRICT JSON only, with this schema:
{
  "score": number,    // 1..5, half points allowed
  "bullets": string[] // 0..5 items
}"""

FILTERS_SYSTEM_PROMPT = """You are a recruitment search strategist.
Given a JOB DESCRIPTION (JD), produce structured filters for a LinkedIn Recruiter search.

Return STRICT JSON only, with this schema:
{
  "job_titles": string[],       // 6-12 precise title variants, e.g. "Senior Software Engineer"
  "boolean_titles": string,     // one boolean string for titles using quotes and OR
  "skills": string[],           // 10-20 hard skills or technologies (no seniority words)
  "locations": string[],        // 1-5 locations (city/region or "Remote")
  "keywords": string[],         // 6-12 refinement keywords
  "boolean_keywords": string,   // one boolean string for keywords using quotes and OR
  "industries": string[],       // 3-8 target industries
  "years_experience": string[]  // 1-4 ranges, e.g. ["3-5 years", "5-7 years", "7+ years"]
}

Rules:
- Use common, globally recognizable titles; avoid duplicates and obscure synonyms.
- Boolean strings may only use quotes and OR, e.g. "React" OR "Node.js" OR "TypeScript". Avoid NOT.
- If the JD implies remote or hybrid work, include "Remote" in locations.
- Keep every list concise and de-duplicated.
"""


def build_scoring_messages(resume_text: str, job_description: str) -> list[ChatMessage]:
    user_prompt = (
        "RESUME:\n"
        f'"""{resume_text}"""\n\n'
        "JOB DESCRIPTION:\n"
        f'"""{job_description}"""\n\n'
        "Please follow the JSON schema exactly."
    )
    return [
        ChatMessage(role="system", content=SCORING_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user_prompt),
    ]


def build_filter_messages(job_description: str) -> list[ChatMessage]:
    user_prompt = (
        "JOB DESCRIPTION:\n"
        f'"""{job_description}"""\n'
        "Return ONLY the JSON as specified."
    )
    return [
        ChatMessage(role="system", content=FILTERS_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user_prompt),
    ]
