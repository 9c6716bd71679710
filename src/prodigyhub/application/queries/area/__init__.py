"""Area queries."""

from prodigyhub.application.queries.area.area_stats_query import AreaStatsQuery
from prodigyhub.application.queries.area.get_area_query import GetAreaQuery
from prodigyhub.application.queries.area.list_areas_query import ListAreasQuery

__all__ = ["AreaStatsQuery", "GetAreaQuery", "ListAreasQuery"]
