"""Skill arithmetic shared by every generation stage."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from poolcaptain.models import LineupMember


def skill_sum(members: Iterable[LineupMember], variant: str) -> int:
    return sum(member.skill(variant) for member in members)


def high_skill_count(members: Iterable[LineupMember], variant: str, threshold: int) -> int:
    return sum(1 for member in members if member.skill(variant) >= threshold)


def sort_by_skill(members: Sequence[LineupMember], variant: str) -> List[LineupMember]:
    """Order members by descending skill, keeping input order for ties."""

    return sorted(members, key=lambda member: member.skill(variant), reverse=True)
