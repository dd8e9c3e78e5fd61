"""Ofertas de ejemplo con las que arranca el tablón (no hay base de datos)."""

from app.models.job import Job

DEFAULT_JOBS: tuple[Job, ...] = (
    Job(
        id=1,
        title="Frontend Developer",
        company="Tech GmbH",
        location="Berlin",
        salary="55.000-70.000€",
        description="React, TypeScript, CI/CD",
    ),
    Job(
        id=2,
        title="Backend Developer",
        company="StartupXYZ",
        location="München",
        salary="60.000-75.000€",
        description="Node.js, Express, PostgreSQL",
    ),
    Job(
        id=3,
        title="DevOps Engineer",
        company="CloudCorp",
        location="Hamburg",
        salary="65.000-85.000€",
        description="AWS, Docker, Kubernetes, CI/CD",
    ),
    Job(
        id=4,
        title="Full-Stack Developer",
        company="Digital AG",
        location="Frankfurt",
        salary="58.000-72.000€",
        description="React, Node.js, MongoDB",
    ),
)
