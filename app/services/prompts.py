"""Prompt templates for each summary format."""

from typing import Dict

from app.models.summary import SummaryFormat

ABSTRACT_PROMPT = '''
You are an AI summarizer that condenses lengthy documents into clear, concise, and accurate summaries, keeping only the most important details.

- Maintain neutrality and objectivity.
- Ensure readability, with a tone suitable for business professionals.
- Remove any redundant information.
- Do not add labels like "Summary:" or any markdown.

Text to summarize:
"""{content}"""
'''

LINKEDIN_POST_PROMPT = '''
You are a professional LinkedIn content writer. Create a LinkedIn post summarizing the following content.

- Begin with an attention-grabbing headline.
- Write 2-3 paragraphs that highlight key points.
- End with a call to action or thought-provoking conclusion.
- Write in a professional, engaging tone.
- Use relevant hashtags at the end.

Format like this example:
"""
The Growing Importance of Automatic Summarization in the Age of Information Overload

With the increasing volume of digital content, summarization tools have become essential. These systems use advanced AI to distill long documents into concise, actionable insights, saving time for busy professionals.

Automatic summarization plays a critical role in everything from search engines to research tools, ensuring that the most important information is always accessible in a fraction of the time.

#AI #MachineLearning #Summarization #BusinessEfficiency #InformationOverload
"""

Text to summarize:
"""{content}"""
'''

TWITTER_THREAD_PROMPT = '''
You are a Twitter content creator. Write a Twitter thread summarizing the following content.

- Break it into 3-4 tweets.
- Number the tweets sequentially (e.g., 1/4, 2/4, etc.).
- Add relevant emojis to make the thread more engaging.
- Ensure each tweet is concise and easy to understand.
- Respond with JSON only, using a "twitter_thread" array of tweet strings.

Format like this example:
"""
{{
  "twitter_thread": [
    "1/3 Summarization tools are transforming how we digest vast amounts of information. 🧠📚",
    "2/3 With AI, we can condense long articles into bite-sized summaries that retain key points. 🔑💡",
    "3/3 From research to business intelligence, AI summarization is becoming indispensable in many fields. 🔍📊"
  ]
}}
"""

Text to summarize:
"""{content}"""
'''

PROMPTS: Dict[SummaryFormat, str] = {
    SummaryFormat.ABSTRACT: ABSTRACT_PROMPT,
    SummaryFormat.LINKEDIN_POST: LINKEDIN_POST_PROMPT,
    SummaryFormat.TWITTER_THREAD: TWITTER_THREAD_PROMPT,
}


def render_prompt(summary_format: SummaryFormat, content: str) -> str:
    """Fill the template for a format with the caller's content."""
    return PROMPTS[summary_format].format(content=content)
