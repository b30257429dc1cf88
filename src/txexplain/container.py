from dependency_injector import containers, providers

from txexplain.config import Settings
from txexplain.explainer.pipeline import TransactionExplainer
from txexplain.explainer.registry import build_default_lookups


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    lookups = providers.Singleton(
        build_default_lookups,
        chain=settings.provided.chain,
        settings=settings,
    )

    explainer = providers.Factory(
        TransactionExplainer,
        lookups=lookups,
    )
