"""
Product catalog - The demos and showcase entries on the landing page.

The first four products are live demos backed by this API; the rest are
showcase cards without a demo page.
"""
from typing import List, Optional

from ai_playground.core.config import get_settings
from ai_playground.core.exceptions import ProductNotFoundError
from ai_playground.models.catalog import Product, VoiceChatConfig

ALL_CATEGORIES = "すべて"

ELEVENLABS_WIDGET_SCRIPT_URL = "https://unpkg.com/@elevenlabs/convai-widget-embed"

PLAYGROUND_AUTHOR = "AI Playground"

PRODUCTS: List[Product] = [
    Product(
        id="voice-chat",
        title="AI音声会話エージェント",
        description="ElevenLabsの最先端AI音声技術を使った自然な音声会話体験。リアルタイムで応答する知能的なエージェントと話してみましょう。",
        category="音声AI",
        tags=["ElevenLabs", "音声合成", "リアルタイム", "自然言語"],
        author=PLAYGROUND_AUTHOR,
        createdAt="2024-08-17",
        isNew=True,
        route="/products/voice-chat",
    ),
    Product(
        id="website-analyzer",
        title="ウェブサイト分析ツール",
        description="あなたのウェブサイトを自動で分析し、改善点をAIが提案します。SEO、パフォーマンス、ユーザビリティを総合的に評価。",
        category="ウェブ分析",
        tags=["SEO", "パフォーマンス", "UX評価", "AI分析"],
        author=PLAYGROUND_AUTHOR,
        createdAt="2024-08-17",
        isNew=True,
        route="/products/website-analyzer",
    ),
    Product(
        id="persona-generator",
        title="AI ペルソナ生成 & マーケティング戦略ツール",
        description="サービス情報を入力するだけで、AIが日本市場向けの現実的なペルソナを3つ自動生成し、各ペルソナに最適なマーケティング施策も提案します。",
        category="マーケティング",
        tags=["ペルソナ", "マーケティング戦略", "ターゲット分析", "GPT-4"],
        author=PLAYGROUND_AUTHOR,
        createdAt="2024-08-17",
        isNew=True,
        route="/products/persona-generator",
    ),
    Product(
        id="place-finder",
        title="AI場所検索ツール",
        description="Google Places APIを使って、欲しい条件の場所を簡単に検索。レストラン、カフェ、観光地など、自然言語で検索できます。",
        category="検索・情報",
        tags=["Google Places API", "場所検索", "地図", "リアルタイム"],
        author=PLAYGROUND_AUTHOR,
        createdAt="2024-08-17",
        isNew=True,
        route="/products/place-finder",
    ),
    Product(
        id="1",
        title="AIチャットボット",
        description="自然言語処理を活用した高度な対話システム。カスタマーサポートや個人アシスタントとして活用できます。",
        category="チャット",
        tags=["NLP", "GPT", "カスタマーサポート"],
        author="田中太郎",
        createdAt="2024-08-15",
        isNew=True,
    ),
    Product(
        id="2",
        title="AI画像生成ツール",
        description="テキストから高品質な画像を生成するAIツール。アート作品やマーケティング素材の作成に最適です。",
        category="画像生成",
        tags=["Stable Diffusion", "アート", "マーケティング"],
        author="佐藤花子",
        createdAt="2024-08-12",
    ),
    Product(
        id="3",
        title="音声認識システム",
        description="リアルタイムで音声をテキストに変換するシステム。会議の議事録作成や音声入力に便利です。",
        category="音声認識",
        tags=["音声処理", "議事録", "リアルタイム"],
        author="山田次郎",
        createdAt="2024-08-10",
    ),
    Product(
        id="4",
        title="データ分析AI",
        description="大量のデータから有用な洞察を抽出するAIシステム。ビジネスの意思決定をサポートします。",
        category="データ分析",
        tags=["機械学習", "ビジネス", "予測分析"],
        author="鈴木一郎",
        createdAt="2024-08-08",
    ),
    Product(
        id="5",
        title="コード生成AI",
        description="自然言語の指示からプログラムコードを自動生成するツール。開発効率を大幅に向上させます。",
        category="コード生成",
        tags=["プログラミング", "開発支援", "自動化"],
        author="高橋美咲",
        createdAt="2024-08-05",
        isNew=True,
    ),
    Product(
        id="6",
        title="AIライティングアシスタント",
        description="ブログ記事やマーケティングコピーを効率的に作成するAIライティングツールです。",
        category="ライティング",
        tags=["コンテンツ", "ブログ", "コピーライティング"],
        author="伊藤健太",
        createdAt="2024-08-03",
    ),
]


def list_categories() -> List[str]:
    """ALL_CATEGORIES followed by each category in catalog order."""
    categories = [ALL_CATEGORIES]
    for product in PRODUCTS:
        if product.category not in categories:
            categories.append(product.category)
    return categories


def _matches_search(product: Product, term: str) -> bool:
    fields = [product.title, product.description, *product.tags]
    return any(term in field.lower() for field in fields)


def list_products(category: Optional[str] = None, search: Optional[str] = None) -> List[Product]:
    """
    Products in catalog order, filtered by category and search term.

    Args:
        category: Exact category; empty or "すべて" means all
        search: Case-insensitive substring of the title, description or
            any tag; empty means no filtering
    """
    products = list(PRODUCTS)
    if category and category != ALL_CATEGORIES:
        products = [product for product in products if product.category == category]
    if search:
        term = search.lower()
        products = [product for product in products if _matches_search(product, term)]
    return products


def get_product(product_id: str) -> Product:
    """
    Raises:
        ProductNotFoundError: If no product has this id
    """
    for product in PRODUCTS:
        if product.id == product_id:
            return product
    raise ProductNotFoundError(product_id)


def get_voice_chat_config() -> VoiceChatConfig:
    """Widget script and agent id; unavailable until an agent id is configured."""
    agent_id = get_settings().elevenlabs_agent_id or None
    return VoiceChatConfig(
        scriptUrl=ELEVENLABS_WIDGET_SCRIPT_URL,
        agentId=agent_id,
        available=agent_id is not None,
    )
