"""User queries."""

from prodigyhub.application.queries.user.get_user_query import GetUserQuery
from prodigyhub.application.queries.user.list_users_query import ListUsersQuery
from prodigyhub.application.queries.user.user_stats_query import UserStatsQuery

__all__ = ["GetUserQuery", "ListUsersQuery", "UserStatsQuery"]
