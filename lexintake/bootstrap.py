"""Process-start wiring for lexintake.

Loads settings, configures logging and checks that every mode's prompt
library covers its schema. Call once from the host application's startup.

Example usage:

    from lexintake.bootstrap import bootstrap
    from lexintake.orchestration import orchestrate

    settings = bootstrap()
    result = orchestrate("custody_unmarried", payload, settings.orchestrator)
"""

from lexintake.config import get_settings
from lexintake.config.settings import Settings
from lexintake.observability.logging import get_logger, setup_logging
from lexintake.orchestration.modes import MODE_CONFIGS
from lexintake.prompts.library import assert_all_prompt_coverage

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> Settings:
    """Configure logging and run startup checks.

    Args:
        settings: Settings to use instead of the cached `get_settings()`

    Returns:
        The settings in effect

    Raises:
        PromptCoverageError: If a prompt library misses a section or field
            and `orchestrator.assert_prompt_coverage` is enabled
    """
    settings = settings or get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    if settings.orchestrator.assert_prompt_coverage:
        assert_all_prompt_coverage()

    logger.info(
        "lexintake_bootstrapped",
        app_name=settings.app_name,
        intake_modes=[mode.value for mode in MODE_CONFIGS],
        prompt_coverage_checked=settings.orchestrator.assert_prompt_coverage,
    )
    return settings
