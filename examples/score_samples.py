"""
Tiny helper script to sanity check the German language profile wiring.
Requires the nltk punkt_tab model (`python -m nltk.downloader punkt_tab`).
"""

from __future__ import annotations

from wstf_readability.config import ReadabilityConfig
from wstf_readability.engine import build_engine
from wstf_readability.formulas import FormulaVariant, interpret_score


def main() -> None:
    engine = build_engine(ReadabilityConfig(language="de"))
    samples = [
        "Der Hund läuft. Die Katze schläft.",
        "Die Bundesregierung veröffentlicht regelmäßig umfangreiche Verwaltungsdaten, "
        "deren Nachnutzung durch Unternehmen und Forschungseinrichtungen ausdrücklich erwünscht ist.",
    ]

    for sample in samples:
        result = engine.evaluate(sample, FormulaVariant.WSTF1)
        print("-" * 40)
        print(sample)
        print(f"Counts: {result.counts.to_dict()}")
        print(f"WSTF1: {result.score:.2f} (grade {interpret_score(result.score)})")


if __name__ == "__main__":
    main()
