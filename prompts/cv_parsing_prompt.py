"""Prompt template for extracting CV sections from free text."""

CV_PARSING_PROMPT = """You are an expert CV parser. Your task is to turn free text (a pasted CV, a LinkedIn
profile export or a short self-description) into structured CV sections.

Extract the following information from the text provided below:

1. Personal Information: full name, professional title, email, phone, location,
   LinkedIn URL, website, GitHub URL
2. Professional Summary: the summary or objective, if present
3. Work Experience: company, position, start and end dates, whether the role is current,
   description, achievements
4. Education: institution, degree, field of study, start and end dates, GPA, description
5. Skills: name and level (one of: beginner, intermediate, advanced, expert)
6. Languages: name and proficiency (one of: basic, conversational, professional, native)
7. Certificates: name, issuer, date, URL

Text:
{cv_text}

IMPORTANT: Return a single JSON object using these EXACT camelCase field names and omit
any section that is not mentioned in the text. Do not invent information.

{{
  "personalInfo": {{"fullName": "", "title": "", "email": "", "phone": "", "location": "",
                    "linkedin": "", "website": "", "github": ""}},
  "summary": "",
  "experience": [{{"company": "", "position": "", "startDate": "YYYY-MM", "endDate": "YYYY-MM or null",
                  "current": false, "description": "", "achievements": [""]}}],
  "education": [{{"institution": "", "degree": "", "field": "", "startDate": "YYYY-MM",
                 "endDate": "YYYY-MM or null", "current": false, "gpa": "", "description": ""}}],
  "skills": [{{"name": "", "level": "intermediate"}}],
  "languages": [{{"name": "", "proficiency": "conversational"}}],
  "certificates": [{{"name": "", "issuer": "", "date": "", "url": ""}}]
}}

Return ONLY valid JSON. Do not wrap it in markdown code fences.
"""
