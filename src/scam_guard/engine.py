"""Single-message risk analysis over the default rule pipeline."""


from .analysis import (
    HYPERPARAMETERS,
    AnalysisDocument,
    AnalysisMode,
    AnalysisResult,
    Hyperparameters,
    empty_result,
    risk_level_for_score,
    score_from_triggers,
    summarize,
)
from .log import get_logger
from .rules import Pipeline

logger = get_logger("engine")

DEFAULT_PIPELINE = Pipeline.from_jsonl()


def analyze(
    text: str,
    mode: AnalysisMode | str = AnalysisMode.BALANCED,
    *,
    hyperparameters: Hyperparameters = HYPERPARAMETERS,
    pipeline: Pipeline | None = None,
) -> AnalysisResult:
    """Score ``text`` for scam and coercion risk.

    Blank input (whitespace and byte-order marks only) short-circuits to a
    zero score without sanitizing. Otherwise the text is sanitized, every
    rule runs category by category, duplicate matches collapse, and
    the severity sum is scaled by ``mode`` and bounded to 0-100.

    Raises:
        ValueError: If ``mode`` is not a known analysis mode.
    """
    analysis_mode = AnalysisMode(mode)
    if not text.replace("\ufeff", "").strip():
        return empty_result(analysis_mode)

    document = AnalysisDocument.from_text(text)
    active_pipeline = DEFAULT_PIPELINE if pipeline is None else pipeline
    state = active_pipeline.forward(document)

    score = score_from_triggers(state.triggers, analysis_mode, hyperparameters)
    logger.debug(
        "Analyzed message",
        extra={
            "mode": analysis_mode.value,
            "score": score,
            "trigger_count": len(state.triggers),
        },
    )
    return AnalysisResult(
        score=score,
        triggers=state.triggers,
        mode=analysis_mode,
        risk_level=risk_level_for_score(score, hyperparameters),
        summary=summarize(len(state.triggers)),
        counts=state.counts,
    )
