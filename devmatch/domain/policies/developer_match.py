"""DeveloperTicketMatcher — weighted developer/ticket fitness with reasons."""

from __future__ import annotations

from devmatch.domain.entities.developer import Developer
from devmatch.domain.entities.match import DeveloperMatch
from devmatch.domain.entities.ticket import Ticket
from devmatch.domain.policies.developer_scores import score_availability, score_rating
from devmatch.domain.policies.skill_match import SkillMatch, match_skills
from devmatch.domain.value_objects.enums import SkillMatchTier
from devmatch.domain.value_objects.score import round_half_up
from devmatch.domain.value_objects.weights import DEFAULT_CONFIG, MatchingConfig


class DeveloperTicketMatcher:
    """Combines skill coverage, availability and rating into one score.

    match_score = round(skill% * 0.5 + availability * 0.3 + rating * 0.2)

    Reasons are for display only and never influence the score.
    """

    def __init__(self, config: MatchingConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def config(self) -> MatchingConfig:
        return self._config

    def match(self, developer: Developer, ticket: Ticket) -> DeveloperMatch:
        skills = match_skills(developer, ticket)
        availability = score_availability(developer, self._config.availability)
        rating = score_rating(developer, self._config.rating)

        weights = self._config.weights
        match_score = round_half_up(
            skills.percentage * weights.skill_match
            + availability * weights.availability
            + rating * weights.rating
        )

        return DeveloperMatch(
            developer=developer,
            match_score=max(0, min(100, match_score)),
            match_reasons=tuple(self._reasons(developer, skills)),
            skill_match_percent=skills.percentage,
            availability_score=availability,
            rating_score=rating,
            matching_skills=skills.matching_skills,
        )

    def skill_tier(self, percentage: int) -> SkillMatchTier:
        if percentage >= self._config.strong_skill_percent:
            return SkillMatchTier.STRONG
        if percentage >= self._config.good_skill_percent:
            return SkillMatchTier.GOOD
        if percentage > 0:
            return SkillMatchTier.PARTIAL
        return SkillMatchTier.NONE

    def _reasons(self, developer: Developer, skills: SkillMatch) -> list[str]:
        reasons = [_TIER_REASONS[self.skill_tier(skills.percentage)].format(pct=skills.percentage)]

        if skills.matching_skills:
            reasons.append(f"Matching skills: {', '.join(skills.matching_skills)}")

        if developer.online:
            reasons.append("Developer is currently online")
        elif developer.availability:
            reasons.append("Developer is generally available")

        rating = developer.rating
        if rating is not None:
            if rating >= self._config.rating.highly_rated:
                reasons.append(f"Highly rated ({_stars(rating)}★)")
            elif rating >= self._config.rating.well_rated:
                reasons.append(f"Well rated ({_stars(rating)}★)")

        return reasons


_TIER_REASONS: dict[SkillMatchTier, str] = {
    SkillMatchTier.STRONG: "Strong skills match ({pct}%)",
    SkillMatchTier.GOOD: "Good skills match ({pct}%)",
    SkillMatchTier.PARTIAL: "Partial skills match ({pct}%)",
    SkillMatchTier.NONE: "No direct skills match",
}


def _stars(rating: float) -> str:
    """Stored rating as is, without a trailing ``.0`` on whole stars."""
    text = str(rating)
    return text[:-2] if text.endswith(".0") else text
