"""
Turns Configuration

Centralized defaults for the turns test and its reports.

Usage:
    from seqturns.config import TURNS_CONFIG as cfg

    z, p = ztest.evaluate(obs, exp, var, ccorr=cfg.test.ccorr, tails=cfg.test.tails)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ZTestDefaults:
    """Defaults for the z-test step."""

    # Continuity correction of +/-0.5 on the observed deviation
    ccorr: bool = True

    # 1 = one-tailed p-value, 2 = two-tailed
    tails: int = 2


@dataclass(frozen=True)
class ReportDefaults:
    """Defaults for dump()."""

    precision_s: int = 2    # decimal places for statistics
    precision_p: int = 6    # decimal places for p-values
    text: int = 1           # 0 = key=value, 1 = one line, 2 = verbose


@dataclass(frozen=True)
class TurnsConfig:
    """Master configuration container."""

    test: ZTestDefaults = field(default_factory=ZTestDefaults)
    report: ReportDefaults = field(default_factory=ReportDefaults)


# Global config instance
TURNS_CONFIG = TurnsConfig()
