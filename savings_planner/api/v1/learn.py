"""GET /v1/learn - Static learning articles"""

from fastapi import APIRouter

from savings_planner.api.v1.schemas import LearningArticleSchema, LearningResponse
from savings_planner.domain.learning import list_categories, load_articles

router = APIRouter()


@router.get("/learn", response_model=LearningResponse)
def learn():
    articles = load_articles()
    return LearningResponse(
        total_articles=len(articles),
        categories=list_categories(articles),
        content=[LearningArticleSchema.model_validate(article) for article in articles],
    )
