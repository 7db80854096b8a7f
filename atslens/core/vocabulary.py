from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# Fixed rubric tables. These are part of the scoring contract: keep stable,
# never load from configuration.

# Industry / technical / soft-skill reference terms. Matched as lower-case
# substrings of the extracted CV text.
REFERENCE_KEYWORDS: Tuple[str, ...] = (
    # programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "go", "rust", "swift", "kotlin",
    # frameworks
    "react", "angular", "vue", "node", "express", "django", "flask", "spring", "laravel", "rails",
    # cloud & devops
    "aws", "azure", "gcp", "docker", "kubernetes", "ci/cd", "jenkins", "terraform", "ansible",
    # databases
    "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "oracle",
    # methodologies
    "agile", "scrum", "kanban", "devops", "tdd", "api", "rest", "graphql",
    # soft skills
    "leadership", "communication", "collaboration", "problem-solving", "analytical", "strategic",
)

# Grouping is documentation only; every verb scores the same.
STRONG_ACTION_VERB_GROUPS: Dict[str, Tuple[str, ...]] = {
    "leadership": ("led", "managed", "directed", "supervised", "coordinated", "orchestrated", "spearheaded"),
    "achievement": ("achieved", "accomplished", "delivered", "exceeded", "surpassed", "outperformed"),
    "growth": ("increased", "improved", "enhanced", "optimized", "maximized", "boosted", "elevated"),
    "creation": ("created", "developed", "designed", "built", "launched", "established", "founded"),
    "efficiency": ("streamlined", "automated", "simplified", "reduced", "eliminated", "consolidated"),
    "analysis": ("analyzed", "evaluated", "assessed", "researched", "investigated", "identified"),
    "strategy": ("strategized", "planned", "implemented", "executed", "initiated", "pioneered"),
    "collaboration": ("collaborated", "partnered", "facilitated", "mentored", "trained", "coached"),
    "technical": ("engineered", "programmed", "architected", "deployed", "configured", "integrated"),
}

STRONG_ACTION_VERBS: Tuple[str, ...] = tuple(
    verb for group in STRONG_ACTION_VERB_GROUPS.values() for verb in group
)

# Substring matches against lower-cased experience text.
WEAK_PHRASES: Tuple[str, ...] = (
    "responsible for",
    "worked on",
    "helped with",
    "assisted with",
    "participated in",
    "involved in",
    "tasked with",
    "duties included",
    "was responsible",
    "in charge of",
)

PASSIVE_INDICATORS: Tuple[str, ...] = ("was", "were", "been", "being")

# Filler words excluded from the frequency pass of the job keyword extractor.
JOB_DESCRIPTION_STOPWORDS: FrozenSet[str] = frozenset({
    "about", "after", "before", "being", "could", "during", "every", "other", "should",
    "their", "there", "these", "those", "through", "under", "where", "which", "while", "would",
})

# Example verbs quoted in remediation hints.
SUGGESTED_VERBS: Tuple[str, ...] = ("Led", "Achieved", "Optimized")
