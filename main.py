#!/usr/bin/env python3
"""
Classifier Boundary Zoo - Main Entry Point

Generates the seeded demo scenes for six classic classifiers (logistic,
multinomial, QDA, LDA, perceptron, ridge) and prints, renders or exports
them.

Usage:
    python main.py                          # Summary of every model
    python main.py --list                   # List model names
    python main.py --model ridge --param 10 # One model, one hyperparameter
    python main.py --render diagrams        # Write one SVG per model
    python main.py --export-json zoo.json   # Dump scenes as JSON
"""

import argparse
import json
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import OUTPUT_DIR
from discriminants import DegenerateMatrixError
from evaluation import format_confusion_matrix, render_all, scene_report
from synthetic import ConfigurationError
from zoo import available_models, generate, get_spec

logger = logging.getLogger(__name__)


def list_models():
    """Print every registered model with its seed and title."""
    print("Available models:")
    for name in available_models():
        spec = get_spec(name)
        print(f"  {name:<12} seed={spec.seed:<4} {spec.title}")


def build_scenes(models, parameter=None):
    """
    Generate scenes, skipping models whose generation fails.

    Args:
        models: Model names to generate
        parameter: Hyperparameter applied to every listed model

    Returns:
        Dict of name -> Scene, in input order
    """
    scenes = {}
    for name in models:
        try:
            scenes[name] = generate(name, parameter)
        except (ConfigurationError, DegenerateMatrixError) as e:
            logger.error("Skipping %s: %s", name, e)
    return scenes


def print_summary(scenes, show_confusion=False):
    """Point counts, boundary and training accuracy per scene."""
    for name, scene in scenes.items():
        report = scene_report(scene)
        counts = ", ".join(f"class {k}: {v}" for k, v in report.class_counts.items())

        print(f"\n{scene.title} [{name}]")
        print("-" * 50)
        print(f"Points:   {report.n_points} ({counts})")
        if report.parameter is not None:
            print(f"Param:    {report.parameter}")
        if scene.boundary is not None:
            b = scene.boundary
            print(f"Boundary: {b.w0:+.4f} {b.w1:+.4f}*x {b.w2:+.4f}*y = 0")
        elif scene.segments is not None:
            print(f"Segments: {len(scene.segments)} pairwise")
        elif 'curves' in scene.extras:
            print(f"Curves:   {len(scene.extras['curves'])} branch(es)")
        print(f"Accuracy: {report.accuracy:.2%}")

        if show_confusion:
            print(format_confusion_matrix(report.confusion, title="Confusion Matrix"))


def export_json(scenes, path, include_regions=False):
    """Write every scene as one JSON document keyed by model name."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = {name: scene.to_dict(include_regions=include_regions)
            for name, scene in scenes.items()}
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info("Exported %d scene(s) to %s", len(scenes), path)
    return path


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Classifier Boundary Zoo - decision boundaries of classic classifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                               # Summary of every model
    python main.py --list                        # List model names
    python main.py --model logistic --param 0.1  # Strong regularization
    python main.py --model perceptron --param 3  # Boundary after epoch 3
    python main.py --render out --format png     # PNG diagrams
    python main.py --export-json zoo.json        # JSON export
        """
    )

    parser.add_argument('--list', action='store_true',
                       help='List available models and exit')
    parser.add_argument('--model', type=str, default=None,
                       help='Generate a single model (default: all)')
    parser.add_argument('--param', type=str, default=None,
                       help='Hyperparameter: C (logistic), alpha (ridge), epoch (perceptron)')
    parser.add_argument('--render', type=str, nargs='?', const=OUTPUT_DIR, default=None,
                       metavar='DIR', help=f'Render diagrams into DIR (default: {OUTPUT_DIR})')
    parser.add_argument('--format', type=str, choices=['svg', 'png'], default='svg',
                       help='Diagram file format')
    parser.add_argument('--export-json', type=str, default=None, metavar='PATH',
                       help='Write scenes as JSON')
    parser.add_argument('--regions', action='store_true',
                       help='Include the region grid in the JSON export')
    parser.add_argument('--confusion', action='store_true',
                       help='Print a confusion matrix per model')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_models()
        return 0

    if args.param is not None and args.model is None:
        parser.error("--param requires --model")

    if args.model is not None:
        try:
            get_spec(args.model)
        except ConfigurationError as e:
            parser.error(str(e))
        models = [args.model.lower()]
    else:
        models = available_models()

    print("=" * 50)
    print("Classifier Boundary Zoo")
    print("=" * 50)

    scenes = build_scenes(models, args.param)
    if not scenes:
        print("\nNo scenes generated.")
        return 1

    print_summary(scenes, show_confusion=args.confusion)

    if args.render:
        paths = render_all(scenes, args.render, fmt=args.format)
        print(f"\nRendered {len(paths)} diagram(s) to: {args.render}")

    if args.export_json:
        export_json(scenes, args.export_json, include_regions=args.regions)
        print(f"Scenes exported to: {args.export_json}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
