from .campaign import Campaign
from .keyword import Keyword
from .article import Article
from .article_queue import ArticleQueue

__all__ = [
    "Campaign",
    "Keyword",
    "Article",
    "ArticleQueue",
]
