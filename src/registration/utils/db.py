from protean.domain import Domain
from sqlalchemy import create_engine

# Providers whose schema lives in an RDBMS and must be created up front
RDBMS_PROVIDERS = ("sqlite", "postgresql")


def setup_db(domain: Domain):
    """Setup database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])

                # Ensure aggregates are registered with SQLAlchemy by touching
                #   each repository's DAO before creating tables.
                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                provider._metadata.create_all(engine)
                engine.dispose()


def drop_db(domain: Domain):
    """Drop database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
                engine.dispose()
