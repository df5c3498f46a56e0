"""Report building for formatting runs"""

from typing import Any, Dict, List
import json
import logging

from ..alignment.base import BlockResult


logger = logging.getLogger(__name__)


class OutputFormatter:
    """Turns per-block results into a report dict, JSON file or console summary"""

    @staticmethod
    def build_summary(results: List[BlockResult]) -> Dict[str, Any]:
        """Counts over all blocks of one run"""
        return {
            "total_blocks": len(results),
            "total_lines": sum(len(r.block) for r in results),
            "formatted_blocks": sum(1 for r in results if r.formatted),
            "changed_blocks": sum(1 for r in results if r.changed),
            "rules_applied": sum(len(r.applied) for r in results),
        }

    @staticmethod
    def build_report(results: List[BlockResult]) -> Dict[str, Any]:
        return {
            "summary": OutputFormatter.build_summary(results),
            "blocks": [r.to_dict() for r in results],
        }

    @staticmethod
    def save_report(report: Dict[str, Any], path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, ensure_ascii=False, indent=2)

    @staticmethod
    def print_report(report: Dict[str, Any]) -> None:
        summary = report["summary"]
        logger.info(
            f"Blocks: {summary['total_blocks']} "
            f"(formatted {summary['formatted_blocks']}, changed {summary['changed_blocks']}); "
            f"rules applied: {summary['rules_applied']}"
        )
        for block in report["blocks"]:
            if not block["applied_rules"]:
                continue
            rules = ", ".join(
                f"/{r['pattern']}/ {r['spacing'].lower()} @{r['width']}"
                for r in block["applied_rules"]
            )
            logger.info(f"  lines {block['from'] + 1}-{block['to']}: {rules}")
