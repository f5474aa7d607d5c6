from .query import query, query_bindable

__all__ = ["query", "query_bindable"]
