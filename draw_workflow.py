#!/usr/bin/env python
"""
Save the campaign workflow graph

Usage:
    python draw_workflow.py                  # workflow_graph.png (needs network)
    python draw_workflow.py workflow.mmd     # Mermaid source, offline
"""

import os
import sys

from hotel_campaigns.utils import draw_workflow_graph


def main():
    output = sys.argv[1] if len(sys.argv) > 1 else "workflow_graph.png"

    saved = draw_workflow_graph(output)
    if not saved:
        sys.exit(1)

    print(f"✓ Workflow graph saved to: {os.path.abspath(saved)}")


if __name__ == "__main__":
    main()
