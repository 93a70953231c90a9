"""
Device Confidence Scoring

This module turns an identity record into a confidence score, a pass/fail
verdict and an ordered list of human-readable signals explaining the score.

Scoring policies are keyed by template id. Each policy is a ScoringAlgorithm
registered on a ScoringEngine; the engine looks the template up on every
request and falls back to a basic check when the template is unknown.

Reference template 223323710 (aadz_test_1):
- Validated in the National Consumer Database: +0.7
- At least one email: +0.1
- At least one email with qualityLevel >= 2: +0.1
- IP frequency / intensity / strength: reported, not weighted
- Score clamped to [0, 1]; validated iff score >= threshold
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from device_validation.core.constants import (
    BASIC_NOT_VALIDATED_SCORE,
    BASIC_VALIDATED_SCORE,
    DEFAULT_TEMPLATE_ID,
    DEFAULT_TEMPLATE_NAME,
    EMAIL_PRESENT_WEIGHT,
    HIGH_QUALITY_EMAIL_LEVEL,
    HIGH_QUALITY_EMAIL_WEIGHT,
    SCORE_MAX,
    SCORE_MIN,
    VALIDATED_IDENTITY_WEIGHT,
    VALIDATION_THRESHOLD,
)
from device_validation.models.schemas import IdentityRecord
from device_validation.utils.helpers import clamp, format_number

logger = logging.getLogger(__name__)

IP_METRICS = ("frequency", "intensity", "strength")


@dataclass
class ScoringResult:
    """Outcome of scoring one identity record."""
    confidence_score: float
    validated: bool
    signals: List[str] = field(default_factory=list)


class ScoringAlgorithm(ABC):
    """A scoring policy bound to one template id."""

    template_id: str
    template_name: str

    @abstractmethod
    def evaluate(self, record: IdentityRecord) -> ScoringResult:
        """Score a record. Must always append at least one signal."""


class AadzTest1Algorithm(ScoringAlgorithm):
    """
    Scoring for template aadz_test_1.

    Only the first identity is scored; later identities are ignored. The
    verdict is decided by the threshold alone, so a validated identity with
    no other signals (score 0.7) does not pass.
    """

    template_id = DEFAULT_TEMPLATE_ID
    template_name = DEFAULT_TEMPLATE_NAME

    def __init__(self, threshold: float = VALIDATION_THRESHOLD):
        self.threshold = threshold

    def evaluate(self, record: IdentityRecord) -> ScoringResult:
        signals: List[str] = []

        identity = record.first_identity
        if identity is None:
            signals.append("No identity data found")
            return ScoringResult(confidence_score=0.0, validated=False, signals=signals)

        score = 0.0

        if identity.validated is True:
            score += VALIDATED_IDENTITY_WEIGHT
            signals.append("Device validated in National Consumer Database")
        else:
            signals.append("Device not found in National Consumer Database")

        if identity.emails:
            score += EMAIL_PRESENT_WEIGHT
            signals.append(f"{len(identity.emails)} email(s) associated")

            high_quality = [
                email for email in identity.emails
                if (email.quality_level or 0) >= HIGH_QUALITY_EMAIL_LEVEL
            ]
            if high_quality:
                score += HIGH_QUALITY_EMAIL_WEIGHT
                signals.append(f"{len(high_quality)} high-quality email(s)")

        if identity.ips:
            ip = identity.ips[0]
            if ip is None:
                signals.append("IP data unavailable")
            else:
                signals.append("IP data available")
                # Observed only until a weighting is defined for these metrics
                for metric in IP_METRICS:
                    value = getattr(ip, metric)
                    if value is not None:
                        signals.append(f"IP {metric}: {value}")

        score = clamp(score, SCORE_MIN, SCORE_MAX)
        validated = score >= self.threshold

        relation = "exceeds" if validated else "below"
        signals.append(
            f"Confidence score ({format_number(score, 2)}) {relation} threshold ({self.threshold})"
        )

        return ScoringResult(confidence_score=score, validated=validated, signals=signals)


def basic_validation(record: IdentityRecord) -> ScoringResult:
    """Fallback used when a template has no registered algorithm."""
    identity = record.first_identity
    validated = identity is not None and identity.validated is True

    return ScoringResult(
        confidence_score=BASIC_VALIDATED_SCORE if validated else BASIC_NOT_VALIDATED_SCORE,
        validated=validated,
        signals=["Device validated (basic)" if validated else "Device not validated (basic)"],
    )


class ScoringEngine:
    """
    Route identity records to the scoring algorithm for their template.

    The registry is copy-on-write: register_algorithm builds a new mapping
    under a lock and swaps it in, so a concurrent lookup sees either the old
    or the new mapping, never a partial update.
    """

    def __init__(self, algorithms: Optional[List[ScoringAlgorithm]] = None):
        self._lock = threading.Lock()
        self._algorithms: Dict[str, ScoringAlgorithm] = {}
        for algorithm in algorithms or []:
            self.register_algorithm(algorithm)

    @classmethod
    def with_defaults(cls, threshold: float = VALIDATION_THRESHOLD) -> "ScoringEngine":
        """Engine with the built-in reference algorithm registered."""
        return cls([AadzTest1Algorithm(threshold=threshold)])

    def calculate_score(self, record: IdentityRecord, template_id: str) -> ScoringResult:
        """
        Calculate the confidence score for an identity record.

        Never raises for an unknown template: the basic fallback is used and
        a warning is logged.
        """
        algorithm = self._algorithms.get(template_id)

        if algorithm is None:
            logger.warning(
                f"No scoring algorithm found for template {template_id}, using basic validation"
            )
            return basic_validation(record)

        return algorithm.evaluate(record)

    def get_algorithm(self, template_id: str) -> Optional[ScoringAlgorithm]:
        return self._algorithms.get(template_id)

    def get_supported_templates(self) -> List[str]:
        """Registered template ids, in registration order."""
        return list(self._algorithms.keys())

    def register_algorithm(self, algorithm: ScoringAlgorithm) -> None:
        """Register an algorithm; an existing one with the same template id is replaced."""
        with self._lock:
            algorithms = dict(self._algorithms)
            algorithms[algorithm.template_id] = algorithm
            self._algorithms = algorithms
        logger.info(
            f"Registered scoring algorithm {algorithm.template_name} for template {algorithm.template_id}"
        )
