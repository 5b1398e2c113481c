"""Plain-language description of the structured filters of a search.

The free-text term is not described; only city, degree, specialties and
experience level are.
"""

from src.core.schemas import ExperienceLevel, SearchRequest

DEGREE_OPTIONS: tuple[str, ...] = ("MD", "PhD", "MSW")

SPECIALTY_OPTIONS: tuple[str, ...] = (
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health",
    "Men's issues",
    "Relationship Issues",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations",
    "Attention and Hyperactivity",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
)

LEVEL_LABELS: dict[ExperienceLevel, str] = {
    ExperienceLevel.EMERGING: "Emerging (0-3 years of experience)",
    ExperienceLevel.ESTABLISHED: "Established (4-7 years of experience)",
    ExperienceLevel.EXPERT: "Expert (8+ years of experience)",
}


def describe_search(request: SearchRequest) -> str:
    """Describe the active filters, e.g. 'Showing advocates in Austin with MD degree'."""
    parts: list[str] = []
    if request.city:
        parts.append(f"in {request.city}")
    if request.degree:
        parts.append(f"with {request.degree} degree")
    if request.specialties:
        parts.append(f"specializing in {', '.join(request.specialties)}")

    level = request.experience_level
    if not parts and level is ExperienceLevel.ANY:
        return "Showing all advocates"

    prefix = "advocates"
    if level is not ExperienceLevel.ANY:
        prefix = f"{LEVEL_LABELS[level]} advocates"
    return " ".join(["Showing", prefix, *parts])
