"""Static learning articles about savings and investment instruments"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Sequence, Tuple

from savings_planner.domain.models import LearningArticle

CONTENT_FILE = Path(__file__).resolve().parent / "learning_content.json"


@lru_cache(maxsize=1)
def load_articles() -> Tuple[LearningArticle, ...]:
    """Read the packaged article catalog once"""
    data = json.loads(CONTENT_FILE.read_text(encoding="utf-8"))
    return tuple(LearningArticle(**item) for item in data)


def list_categories(articles: Sequence[LearningArticle]) -> List[str]:
    """Distinct categories in first-seen order"""
    return list(dict.fromkeys(article.category for article in articles))
