"""
Workflow visualization utility

A ``.png`` path is rendered through the mermaid.ink service; any other path
gets the Mermaid source text, which needs no network access.
"""

from typing import Optional


def save_graph(workflow, output_path: str) -> Optional[str]:
    """
    Write a compiled workflow's graph to disk

    Args:
        workflow: Compiled LangGraph workflow
        output_path: Target file; ``.png`` for an image, anything else for Mermaid text

    Returns:
        Path to saved graph or None if rendering failed
    """
    graph = workflow.get_graph()
    try:
        if output_path.lower().endswith(".png"):
            with open(output_path, "wb") as f:
                f.write(graph.draw_mermaid_png())
        else:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(graph.draw_mermaid())
    except Exception as e:
        print(f"✗ Failed to draw workflow graph: {e}")
        if output_path.lower().endswith(".png"):
            print("  PNG rendering needs network access to mermaid.ink; try a .mmd path")
        return None

    return output_path


def draw_workflow_graph(output_path: str = "workflow_graph.png") -> Optional[str]:
    """
    Build the campaign workflow and save its graph

    The graph is built with an unconfigured completion service, so no API
    keys are needed to draw it.
    """
    from ..adapters.completion import CompletionService
    from ..workflow import build_workflow

    return save_graph(build_workflow(CompletionService(llm=None)), output_path)
