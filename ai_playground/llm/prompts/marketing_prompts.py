"""
Marketing Prompts - Per-persona marketing strategy generation.

The personas produced by the persona generator are embedded verbatim
(pretty-printed JSON) so each strategy can reference its target persona.
"""
import json
from typing import Any

MARKETING_SYSTEM_PROMPT = (
    "あなたは日本市場に精通したマーケティング専門家です。"
    "実用的で具体的なマーケティング施策を提案してください。"
    "出力は必ずJSON形式で、構文エラーがないようにしてください。"
)

MARKETING_OUTPUT_TEMPLATE = """{
  "Persona A": {
    "target_name": "ペルソナ名",
    "ad_copies": [
      "キャッチコピー1",
      "キャッチコピー2",
      "キャッチコピー3"
    ],
    "channels": [
      {
        "name": "チャネル名",
        "priority": 1,
        "reason": "選択理由"
      }
    ],
    "timing": {
      "weekdays": "平日の最適時間帯",
      "weekends": "休日の最適時間帯",
      "reason": "タイミング選択の理由"
    },
    "expected_performance": {
      "click_rate": "予想クリック率（%）",
      "conversion_rate": "予想コンバージョン率（%）",
      "engagement_score": "エンゲージメント予想（1-10点）"
    },
    "action_plan": [
      "具体的なアクション1",
      "具体的なアクション2",
      "具体的なアクション3"
    ]
  },
  "Persona B": { ... },
  "Persona C": { ... }
}"""


def get_marketing_system_prompt() -> str:
    """Get the system prompt for marketing strategy generation."""
    return MARKETING_SYSTEM_PROMPT


def get_marketing_user_prompt(
    service_name: str,
    service_description: str,
    personas: Any,
) -> str:
    """
    Get the user prompt for marketing strategy generation.

    Args:
        service_name: Product or service name
        service_description: Short description of the product
        personas: Persona data as returned by the persona generator

    Returns:
        Prompt asking for one strategy per persona as JSON
    """
    personas_json = json.dumps(personas, ensure_ascii=False, indent=2)

    return f"""あなたは日本市場のマーケティング専門家です。以下のサービスとペルソナ情報を基に、各ペルソナに最適なマーケティング施策を提案してください。

【サービス情報】
サービス名: {service_name}
サービス概要: {service_description}

【ペルソナ情報】
{personas_json}

【要件】
各ペルソナ（Persona A, B, C）について、以下の項目を具体的に提案してください：

1. 広告キャッチコピー案（3-5個）- 各ペルソナの価値観と悩みに響くコピー
2. 最適な広告チャネル（優先順位付き）- SNS、検索広告、動画など
3. おすすめ配信時間帯 - ライフスタイルに合わせた時間
4. 想定エンゲージメント率 - クリック率、コンバージョン率の予測
5. 具体的なアクションプラン - 実行可能な3-5つのステップ

【出力形式】
以下のJSON形式で出力してください（コメント不可、構文エラー無し）：

{MARKETING_OUTPUT_TEMPLATE}

日本市場の特性を考慮し、実用的で実行可能な提案をしてください。"""
