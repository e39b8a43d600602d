"""
Website Analysis Prompts - Structuring the n8n workflow's free-form report.

The workflow returns prose. Rather than guessing a score from keyword
counts, the report is handed back to the model together with a strict
JSON schema describing the fields the front end renders.
"""

ANALYSIS_SCHEMA = {
    "name": "website_analysis",
    "schema": {
        "type": "object",
        "properties": {
            "score": {
                "type": "integer",
                "description": "総合評価スコア（0-100）",
            },
            "strengths": {
                "type": "array",
                "items": {"type": "string"},
                "description": "レポートで評価されているサイトの強み",
            },
            "improvements": {
                "type": "array",
                "items": {"type": "string"},
                "description": "レポートが推奨する具体的な改善提案",
            },
        },
        "required": ["score", "strengths", "improvements"],
        "additionalProperties": False,
    },
}

ANALYSIS_SYSTEM_PROMPT = """あなたはウェブサイト改善のコンサルタントです。
与えられた分析レポートを読み、次の情報をJSONで抽出してください：

- score: レポート全体の評価を0〜100の整数で表したもの
- strengths: レポートで良いと評価されている点（最大5個、簡潔な日本語の文）
- improvements: レポートが推奨している具体的な改善提案（最大8個、レポートの表現をできるだけ保つ）

レポートに書かれていない内容を追加しないでください。"""


def get_analysis_system_prompt() -> str:
    """Get the system prompt for structuring an analysis report."""
    return ANALYSIS_SYSTEM_PROMPT


def get_analysis_user_prompt(url: str, report: str) -> str:
    """
    Get the user prompt for structuring an analysis report.

    Args:
        url: The analyzed website
        report: Free-form report text returned by the workflow
    """
    return f"""対象サイト: {url}

【分析レポート】
{report}"""
