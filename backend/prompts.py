# Prompts sent to the generative model

TARGET_LANGUAGE = "Gujarati"

ANALYSIS_PROMPT = """Analyze this plant image and provide the following information:
1. Plant identification (if possible)
2. Overall health assessment
3. Any visible signs of disease, pest infestation, or nutritional deficiencies
4. Recommendations for care or treatment if issues are detected
5. Detailed solutions for any detected diseases or problems
Please be as detailed as possible in your analysis."""

TRANSLATION_PROMPT_TEMPLATE = """Translate the following plant analysis to {language}:
{text}"""


def build_translation_prompt(text: str, language: str = TARGET_LANGUAGE) -> str:
    return TRANSLATION_PROMPT_TEMPLATE.format(language=language, text=text)
