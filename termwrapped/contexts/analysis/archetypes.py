"""
Archetype Scorer

A closed table of archetype rules, each a pure function StatsSummary -> score >= 0.
The primary archetype is the strictly highest score (first declared wins ties);
below a score of 1 the default archetype is returned with score 0.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from termwrapped.contexts.analysis.logger import log_archetype_scores
from termwrapped.contexts.analysis.stats import StatsSummary

MIN_PRIMARY_SCORE = 1.0
SECONDARY_SCORE_THRESHOLD = 5.0
GENERALIST_CATEGORY_PCT = 2.0
GENERALIST_MIN_CATEGORIES = 6

SCRIPT_RUNNERS = frozenset({"bash", "sh", "python", "python3", "node"})
CLEANUP_COMMANDS = frozenset({"rm", "rmdir", "clean", "prune", "gc"})
VIM_EDITORS = frozenset({"vim", "nvim"})


@dataclass(frozen=True)
class Archetype:
    """A developer personality classification with its score."""

    name: str
    tag: str
    tagline: str
    score: float = 0.0


@dataclass(frozen=True)
class ArchetypeRule:
    """Static archetype definition paired with its scoring function."""

    name: str
    tag: str
    tagline: str
    score: Callable[[StatsSummary], float]

    def evaluate(self, stats: StatsSummary) -> Archetype:
        return Archetype(
            name=self.name, tag=self.tag, tagline=self.tagline, score=self.score(stats)
        )


def _share(stats: StatsSummary, count: int) -> float:
    """count as a percentage of all commands."""
    if not stats.total_commands:
        return 0.0
    return count / stats.total_commands * 100


def _boost_above(pct: float, threshold: float) -> float:
    """Doubles the percentage once it passes the threshold."""
    return pct * 2 if pct > threshold else pct


def _sudo_summoner(stats: StatsSummary) -> float:
    return _boost_above(stats.sudo_pct, 15)


def _git_gladiator(stats: StatsSummary) -> float:
    git_pct = stats.category_pct.get("Git", 0.0)
    if stats.top_command == "git":
        return git_pct * 3
    return git_pct * 1.5


def _docker_captain(stats: StatsSummary) -> float:
    return stats.category_pct.get("Containers", 0.0) * 2.5


def _package_goblin(stats: StatsSummary) -> float:
    return stats.category_pct.get("Packages", 0.0) * 2


def _vim_wizard(stats: StatsSummary) -> float:
    if stats.editor_choice not in VIM_EDITORS:
        return 0.0
    for entry in stats.top_commands[:5]:
        if entry.command in VIM_EDITORS:
            return _share(stats, entry.count) * 5
    return _share(stats, stats.editor_count) * 3


def _ssh_nomad(stats: StatsSummary) -> float:
    return stats.category_pct.get("Network", 0.0) * 2


def _pipe_plumber(stats: StatsSummary) -> float:
    return _boost_above(stats.pipe_pct, 20)


def _script_sorcerer(stats: StatsSummary) -> float:
    return 3 * sum(
        _share(stats, entry.count)
        for entry in stats.top_commands
        if entry.command in SCRIPT_RUNNERS
    )


def _debug_detective(stats: StatsSummary) -> float:
    return stats.category_pct.get("Search", 0.0) * 3


def _clean_freak(stats: StatsSummary) -> float:
    return 5 * sum(
        _share(stats, entry.count)
        for entry in stats.top_commands
        if entry.command in CLEANUP_COMMANDS
    )


def _night_owl(stats: StatsSummary) -> float:
    return _boost_above(stats.night_owl_pct, 15)


def _generalist(stats: StatsSummary) -> float:
    categories_used = sum(1 for pct in stats.category_pct.values() if pct > GENERALIST_CATEGORY_PCT)
    if categories_used >= GENERALIST_MIN_CATEGORIES:
        return categories_used * 5.0
    return 0.0


ARCHETYPE_RULES: Tuple[ArchetypeRule, ...] = (
    ArchetypeRule(
        "THE SUDO SUMMONER", "[#]", "With great power comes great responsibility", _sudo_summoner
    ),
    ArchetypeRule("THE GIT GLADIATOR", "<+>", "Commit early, commit often", _git_gladiator),
    ArchetypeRule("THE DOCKER CAPTAIN", "{~}", "It works in my container", _docker_captain),
    ArchetypeRule("THE PACKAGE GOBLIN", "[=]", "Just one more dependency...", _package_goblin),
    ArchetypeRule("THE VIM WIZARD", ":wq", "I use vim btw", _vim_wizard),
    ArchetypeRule("THE SSH NOMAD", "@>", "My servers miss me", _ssh_nomad),
    ArchetypeRule("THE PIPE PLUMBER", "|>", "Data flows through me", _pipe_plumber),
    ArchetypeRule(
        "THE SCRIPT SORCERER", "#!", "Why do it twice when you can automate?", _script_sorcerer
    ),
    ArchetypeRule(
        "THE DEBUG DETECTIVE", "?!", "The bug is in here somewhere...", _debug_detective
    ),
    ArchetypeRule("THE CLEAN FREAK", "rm", "Disk space is sacred", _clean_freak),
    ArchetypeRule("THE NIGHT OWL", "(o)", "Best code is written after midnight", _night_owl),
    ArchetypeRule("THE GENERALIST", "(*)", "Jack of all trades, master of many", _generalist),
)

DEFAULT_ARCHETYPE = Archetype(
    name="THE TERMINAL WARRIOR", tag=">_", tagline="Command line is my home", score=0.0
)


def score_archetypes(stats: StatsSummary) -> List[Archetype]:
    """Evaluate every rule, in declaration order."""
    scored = [rule.evaluate(stats) for rule in ARCHETYPE_RULES]
    log_archetype_scores({arch.name: arch.score for arch in scored})
    return scored


def detect_archetype(stats: StatsSummary) -> Archetype:
    """
    Select the primary archetype.

    Scores are compared with a strict `>`, so an equal later score never
    replaces the current best.

    Args:
        stats: Computed statistics

    Returns:
        Best matching Archetype, or DEFAULT_ARCHETYPE when no rule scores >= 1
    """
    best = None
    for archetype in score_archetypes(stats):
        if archetype.score > (best.score if best else 0.0):
            best = archetype

    if best is None or best.score < MIN_PRIMARY_SCORE:
        return DEFAULT_ARCHETYPE
    return best


def detect_secondary_archetypes(stats: StatsSummary, primary: Archetype) -> List[Archetype]:
    """
    Other archetypes scoring above SECONDARY_SCORE_THRESHOLD, in declaration order.

    Args:
        stats: Computed statistics
        primary: Archetype returned by detect_archetype (excluded by name)

    Returns:
        List of notable Archetypes (possibly empty)
    """
    return [
        archetype
        for archetype in score_archetypes(stats)
        if archetype.name != primary.name and archetype.score > SECONDARY_SCORE_THRESHOLD
    ]
