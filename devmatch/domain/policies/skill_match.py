"""Skill coverage — how much of a ticket's requirements a developer covers."""

from __future__ import annotations

from dataclasses import dataclass

from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.value_objects.score import round_half_up


@dataclass(frozen=True)
class SkillMatch:
    percentage: int
    matching_skills: tuple[str, ...] = ()


NO_SKILL_MATCH = SkillMatch(percentage=0)


def match_skills(developer: Developer, ticket: Ticket) -> SkillMatch:
    """Pure function: share of the ticket's technical areas the developer covers.

    A requirement is satisfied when any developer skill is a substring of it,
    or it is a substring of the skill (case-insensitive), so "react" covers
    "React Native" and "node.js backend" covers "Node.js".

    The percentage is directional: it measures coverage of what the *ticket*
    asks for. Developer skills irrelevant to the ticket are not penalized.
    """
    skills = _normalize(developer.skills)
    areas = _normalize(ticket.technical_areas)
    if not skills or not areas:
        return NO_SKILL_MATCH

    satisfied = [area for area in areas if any(_overlaps(skill, area) for skill in skills)]

    matching: list[str] = []
    for skill in skills:
        if skill not in matching and any(_overlaps(skill, area) for area in areas):
            matching.append(skill)

    percentage = min(100, round_half_up(len(satisfied) / len(areas) * 100))
    return SkillMatch(percentage=percentage, matching_skills=tuple(matching))


def _overlaps(skill: str, area: str) -> bool:
    return skill in area or area in skill


def _normalize(values) -> list[str]:
    # Blank entries would be a substring of every requirement
    return [v.strip().lower() for v in values or () if v and v.strip()]
