from scanme.core import MAX_PROMPT_CHARS

PROMPT_TEMPLATE = """You are an expert ATS resume analyzer. Read the resume below carefully and provide a detailed analysis.

RESUME CONTENT:
{resume}

IMPORTANT: Analyze the ACTUAL content above. Do NOT use placeholder scores.

Your task:
1. Read the resume content carefully
2. Evaluate each category based on what you see
3. Calculate realistic scores (0-100) for:
   - ATS Compatibility: Check if resume uses standard sections, clear formatting, no tables/images
   - Work Experience: Evaluate quality of job descriptions, achievements, relevance
   - Content: Assess overall information quality, clarity, completeness
   - Formatting: Check professional appearance, readability, consistency
   - Skills: Count and evaluate technical/professional skills listed
   - Keywords: Identify industry-relevant keywords present

4. Calculate overall score as average of category scores

Return JSON in this format (REPLACE ALL VALUES with your analysis):
{{
  "overallScore": <0-100 calculated from categories>,
  "categoryScores": {{
    "atsCompatibility": <0-100 based on format analysis>,
    "workExperience": <0-100 based on experience quality>,
    "content": <0-100 based on content quality>,
    "formatting": <0-100 based on formatting>,
    "skills": <0-100 based on skills count/relevance>,
    "keywords": <0-100 based on keyword density>
  }},
  "strengths": [
    "<identify actual strength from resume>",
    "<identify actual strength from resume>",
    "<identify actual strength from resume>"
  ],
  "improvements": [
    "<identify actual gap or weakness>",
    "<identify actual gap or weakness>",
    "<identify actual gap or weakness>"
  ],
  "suggestions": [
    "<specific actionable suggestion>",
    "<specific actionable suggestion>",
    "<specific actionable suggestion>"
  ],
  "feedback": "<write 3-4 sentences analyzing THIS SPECIFIC resume>"
}}

DO NOT use example numbers. Analyze the actual resume content and provide real scores."""


def build_prompt(resume_text: str) -> str:
    return PROMPT_TEMPLATE.format(resume=resume_text[:MAX_PROMPT_CHARS])
