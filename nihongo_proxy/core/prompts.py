"""提示词模板"""

TRANSLATION_PROMPT_TEMPLATE = """请将以下日文文本翻译成简体中文。重要：请务必保持与原文完全相同的段落和换行结构。

原文：
{text}

    请仅返回翻译后的中文文本。"""


def build_translation_prompt(text: str) -> str:
    """将日文原文嵌入翻译指令模板，原文中的换行原样保留"""
    return TRANSLATION_PROMPT_TEMPLATE.format(text=text)
