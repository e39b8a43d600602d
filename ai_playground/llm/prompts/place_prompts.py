"""
Place Search Prompts - Rewriting vague requests into Places queries.
"""
from typing import Optional

QUERY_EXAMPLES = [
    ("デートにおすすめの場所", "レストラン カフェ 公園"),
    ("友達と遊べる場所", "カラオケ ゲームセンター ボウリング場"),
    ("一人で勉強できる場所", "カフェ 図書館 コワーキングスペース"),
    ("子供と楽しめる場所", "公園 遊園地 動物園 ファミリーレストラン"),
    ("美味しい食事", "評判の良いレストラン"),
    ("おしゃれな場所", "インスタ映え カフェ ショップ"),
    ("安くて美味しい", "コスパの良い 定食 ラーメン 居酒屋"),
]

NO_LOCATION_LABEL = "指定なし"


def get_query_optimization_system_prompt() -> str:
    """Get the system prompt for query rewriting, examples included."""
    examples = "\n".join(
        f'- "{request}" → "{query}"' for request, query in QUERY_EXAMPLES
    )

    return f"""あなたは場所検索の専門家です。ユーザーの曖昧な要求を、Google Places APIで検索しやすい具体的なクエリに変換してください。

以下の例を参考にしてください：
{examples}

レスポンスは以下のJSON形式で返してください：
{{
  "optimizedQuery": "最適化された検索クエリ",
  "explanation": "なぜこのクエリに変換したかの簡単な説明",
  "searchTips": "検索のコツやアドバイス"
}}"""


def get_query_optimization_user_prompt(query: str, location: Optional[str]) -> str:
    """
    Get the user prompt for query rewriting.

    Args:
        query: The user's free-form request
        location: Optional search area
    """
    area = location or NO_LOCATION_LABEL

    return (
        "以下のユーザーの要求を、Google Places APIで検索しやすいクエリに変換してください：\n"
        "\n"
        f'ユーザーの要求: "{query}"\n'
        f'検索エリア: "{area}"'
    )
