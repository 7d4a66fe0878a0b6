#!/usr/bin/env python3
"""
Local scan harness (no HTTP server).

Usage:
  python3 scripts/scan_local.py path/to/photo.jpg --dandruff High --stage "Stage 3" --user-id local_user_1
  python3 scripts/scan_local.py --history --user-id local_user_1

Runs the image through the same AnalyzeHairUseCase the API uses and prints
the classification, recommended oils, care tips and the saved scan id.
Set CLASSIFIER_BASE_URL to hit a real classifier; otherwise the mock is used.
Set SCAN_STORE_PROVIDER=json to keep history between runs.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

load_dotenv()

from haircare.application.exceptions import ClassifierContractError, ClassifierUpstreamError  # noqa: E402
from haircare.domain.entities.image_upload import ImageUpload  # noqa: E402
from haircare.domain.entities.user_selections import DandruffLevel, HairLossStage, UserSelections  # noqa: E402
from haircare.wiring.dependencies import get_container  # noqa: E402


def _print_history(history, user_id: str) -> None:
    scans = history.get_user_scan_history(user_id)
    print(f"\n--- History for {user_id} ({len(scans)} scans) ---")
    for scan in scans:
        oils = ", ".join(scan.recommended_oils) or "-"
        print(f"{scan.formatted_date()}  {scan.hair_type} ({scan.confidence})  {scan.dandruff_level}/{scan.hair_loss_stage}  {oils}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Analyze a hair photo locally")
    parser.add_argument("image", nargs="?", help="Path to the image file")
    parser.add_argument("--dandruff", default=DandruffLevel.low.value, choices=[d.value for d in DandruffLevel])
    parser.add_argument("--stage", default=HairLossStage.stage_1.value, choices=[s.value for s in HairLossStage])
    parser.add_argument("--user-id", default=None, help="Authenticated user id; scans are saved only when set")
    parser.add_argument("--history", action="store_true", help="Print the user's scan history and exit")
    args = parser.parse_args()

    container = get_container()
    analyze = container["analyze"]
    history = container["history"]

    if args.history:
        if not args.user_id:
            parser.error("--history requires --user-id")
        _print_history(history, args.user_id)
        return 0

    if not args.image:
        parser.error("an image path is required")

    try:
        image = ImageUpload.from_path(args.image)
    except OSError as e:
        print(f"ERROR: cannot read image: {e}")
        return 1

    try:
        analysis = analyze.execute(
            image,
            UserSelections.from_payload(args.dandruff, args.stage),
            user_id=args.user_id,
        )
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    except (ClassifierUpstreamError, ClassifierContractError) as e:
        print(f"ERROR: Network error. Please check your connection and try again. ({e})")
        return 2

    print("\n--- Classification ---")
    print(f"hair type: {analysis.classification.hair_type}")
    print(f"confidence: {analysis.classification.confidence_percentage}")
    print(f"selections: dandruff={analysis.selections.dandruff_level} stage={analysis.selections.hair_loss_stage}")

    print("\n--- Recommended oils ---")
    for oil in analysis.oils:
        print(f"  {oil.name} ({oil.price}) - {oil.description}")

    print("\n--- Tips ---")
    for tip in analysis.tips:
        print(f"  {tip.title}: {tip.description}")

    if analysis.scan_id:
        print(f"\nsaved scan_id: {analysis.scan_id}")
    print("-" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
