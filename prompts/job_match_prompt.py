"""Prompt template for matching a CV against a job description."""

JOB_MATCH_PROMPT = """You are an applicant tracking expert. Compare the candidate's CV with the job description.

1. List the important keywords (skills, tools, qualifications, domain terms) from the job
   description that the CV already covers.
2. List the important keywords that are missing from the CV.
3. Score the match from 0 to 100.
4. Suggest specific edits to the CV that would improve the match without inventing experience.

CV:
{cv_data}

Job description:
{job_description}

Return a single JSON object with this structure:
{{
  "score": 0,
  "matchedKeywords": ["..."],
  "missingKeywords": ["..."],
  "suggestions": ["..."]
}}

Return ONLY valid JSON. Do not wrap it in markdown code fences.
"""
