from graphql_api.helpers.ariadne import ariadne_load_local_graphql

from .uploads_card import upload_provider_group_bindable, uploads_card_bindable

uploads_card = ariadne_load_local_graphql(__file__, "uploads_card.graphql")


__all__ = ["upload_provider_group_bindable", "uploads_card_bindable"]
