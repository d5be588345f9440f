"""Reproducibility envelope: seeds, versions, and the generation pipeline.

The pipeline is a pure function of (request, seed, generator version,
catalog snapshot, recovery score). Seeds are minted here, once, at the
boundary; everything below this module only consumes them.

Usage::

    generator = WorkoutGenerator()
    result = generator.generate(request)
    again = generator.replay(request, result.seed, result.plan.generator_version)
    assert again.plan == result.plan
"""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable

from workout_engine.catalog.catalog import MovementCatalog
from workout_engine.generator.assembler import assemble_plan
from workout_engine.generator.composer import compose_blocks
from workout_engine.generator.prescriptions import scheme_id
from workout_engine.generator.templates import build_skeleton, select_template
from workout_engine.models.plan import GenerationChoices, GenerationResult
from workout_engine.models.request import GenerationRequest
from workout_engine.recovery.intensity_cap import DEFAULT_CAP_POLICY, CapPolicy, cap_intensity
from workout_engine.rng import SeededRandom

logger = logging.getLogger(__name__)

GENERATOR_VERSION = "1.0.0"

_MAX_MINT_ATTEMPTS = 8


def mint_seed() -> str:
    """Fresh seed: millisecond timestamp plus a random token.

    The only place the engine reads the clock or OS entropy.
    """
    return f"{int(time.time() * 1000):x}-{secrets.token_hex(4)}"


def mint_distinct_seed(previous: str, seed_factory: Callable[[], str] = mint_seed) -> str:
    """Mint a seed guaranteed to differ from ``previous``."""
    for _ in range(_MAX_MINT_ATTEMPTS):
        seed = seed_factory()
        if seed != previous:
            return seed
    # Factory keeps repeating itself; derive a distinct seed
    return f"{previous}-{secrets.token_hex(4)}"


class WorkoutGenerator:
    """Runs the generation pipeline under an explicit version and catalog.

    Args:
        catalog: Movement snapshot; defaults to the built-in catalog.
        cap_policy: Recovery curve used by the intensity capper.
        seed_factory: Seed source for generate/regenerate without a seed.
        generator_version: Version of the algorithm this instance runs.
    """

    def __init__(
        self,
        catalog: MovementCatalog | None = None,
        cap_policy: CapPolicy = DEFAULT_CAP_POLICY,
        seed_factory: Callable[[], str] = mint_seed,
        generator_version: str = GENERATOR_VERSION,
    ) -> None:
        self.catalog = catalog if catalog is not None else MovementCatalog.default()
        self.cap_policy = cap_policy
        self.seed_factory = seed_factory
        self.generator_version = generator_version

    def run(
        self,
        request: GenerationRequest,
        seed: str,
        generator_version: str,
        recovery_score: float | None = None,
    ) -> GenerationResult:
        """Run the pipeline for an exact seed.

        A ``generator_version`` other than the one this instance runs is
        logged and flagged on the result; the plan is built with, and
        stamped with, the running version.

        Raises:
            ValidationError: If the recovery score is not a finite number.
        """
        seed = str(seed)
        decision = cap_intensity(request.intensity, recovery_score, self.cap_policy)

        mismatch = generator_version != self.generator_version
        if mismatch:
            logger.warning(
                "Requested generator version %s, running %s; output may differ from the original",
                generator_version,
                self.generator_version,
            )

        rng = SeededRandom(seed)
        template = select_template(request.focus, request.duration_minutes, decision.effective, rng)
        skeleton = build_skeleton(template, request.duration_minutes)
        pool = self.catalog.pool_for(request.equipment, request.constraints)
        blocks = compose_blocks(skeleton, pool, decision.effective, rng, request.focus)
        plan = assemble_plan(
            request,
            template,
            blocks,
            decision,
            seed,
            self.generator_version,
            movements={m.id: m for m in pool},
        )
        logger.debug("Generated %s with seed %s (%d draws)", template.id, seed, rng.draws)
        if plan.defects:
            logger.warning("Plan %s has %d empty block(s)", seed, len(plan.defects))

        return GenerationResult(
            plan=plan,
            choices=GenerationChoices(
                template_id=template.id,
                movement_ids=plan.movement_ids,
                scheme_id=scheme_id(decision.effective),
            ),
            requested_version=generator_version,
            version_mismatch=mismatch,
        )

    def generate(
        self,
        request: GenerationRequest,
        seed: str | None = None,
        generator_version: str | None = None,
        recovery_score: float | None = None,
    ) -> GenerationResult:
        """Generate a plan, minting a seed when none is supplied."""
        if seed is None:
            seed = self.seed_factory()
        return self.run(request, seed, generator_version or self.generator_version, recovery_score)

    def regenerate(
        self,
        request: GenerationRequest,
        previous_seed: str,
        generator_version: str | None = None,
        recovery_score: float | None = None,
    ) -> GenerationResult:
        """Generate with a freshly minted seed different from ``previous_seed``."""
        seed = mint_distinct_seed(previous_seed, self.seed_factory)
        return self.run(request, seed, generator_version or self.generator_version, recovery_score)

    def replay(
        self,
        request: GenerationRequest,
        seed: str,
        generator_version: str,
        recovery_score: float | None = None,
    ) -> GenerationResult:
        """Re-run a past generation with its exact seed and version."""
        return self.run(request, seed, generator_version, recovery_score)


# ---------------------------------------------------------------------------
# Functional entry points
# ---------------------------------------------------------------------------


def generate(
    request: GenerationRequest,
    seed: str | None = None,
    *,
    generator_version: str = GENERATOR_VERSION,
    catalog: MovementCatalog | None = None,
    cap_policy: CapPolicy = DEFAULT_CAP_POLICY,
    recovery_score: float | None = None,
    seed_factory: Callable[[], str] = mint_seed,
) -> GenerationResult:
    """Generate a plan with a generator running ``generator_version``."""
    generator = WorkoutGenerator(catalog, cap_policy, seed_factory, generator_version)
    return generator.generate(request, seed, recovery_score=recovery_score)


def regenerate(
    request: GenerationRequest,
    previous_seed: str,
    *,
    generator_version: str = GENERATOR_VERSION,
    catalog: MovementCatalog | None = None,
    cap_policy: CapPolicy = DEFAULT_CAP_POLICY,
    recovery_score: float | None = None,
    seed_factory: Callable[[], str] = mint_seed,
) -> GenerationResult:
    generator = WorkoutGenerator(catalog, cap_policy, seed_factory, generator_version)
    return generator.regenerate(request, previous_seed, recovery_score=recovery_score)


def replay(
    request: GenerationRequest,
    seed: str,
    generator_version: str,
    *,
    catalog: MovementCatalog | None = None,
    cap_policy: CapPolicy = DEFAULT_CAP_POLICY,
    recovery_score: float | None = None,
) -> GenerationResult:
    """Replay on the current algorithm; an older ``generator_version`` is flagged."""
    generator = WorkoutGenerator(catalog=catalog, cap_policy=cap_policy)
    return generator.replay(request, seed, generator_version, recovery_score)
