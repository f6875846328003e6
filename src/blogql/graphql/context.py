"""GraphQL context: carries the caller identity and shared services into resolvers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from ..auth.context import AuthContext
    from ..auth.tokens import TokenIssuer
    from ..config import Settings
    from ..database.connection import Database


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver."""

    def __init__(
        self,
        auth: AuthContext,
        database: Database,
        tokens: TokenIssuer,
        settings: Settings,
    ) -> None:
        super().__init__()
        self.auth = auth
        self.database = database
        self.tokens = tokens
        self.settings = settings
