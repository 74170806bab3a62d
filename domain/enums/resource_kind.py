"""Upstream resource kinds with a declared structural contract."""
from enum import Enum


class ResourceKind(Enum):
    ACCOUNT = "account"
    SUMMONER = "summoner"
    MASTERY_LIST = "mastery_list"
    RANK_LIST = "rank_list"
    MATCH_IDS = "match_ids"
    MATCH = "match"
    VERSIONS = "versions"
    CHAMPION_CATALOG = "champion_catalog"
    AUGMENT_LIST = "augment_list"
