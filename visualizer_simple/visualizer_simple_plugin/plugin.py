import os
from jinja2 import Environment, FileSystemLoader, select_autoescape
from api.poet_api.services.visualizer_plugin import VisualizerPlugin
from api.poet_api.model.graph import Graph


def get_adjacency_rows(graph: Graph):
    """
    Returns one row per vertex in label order.
    Each row holds the label and its outgoing (target, weight) pairs sorted by target.
    """
    rows = []
    for label in sorted(graph.vertices()):
        targets = graph.targets(label)
        rows.append({
            "label": label,
            "targets": sorted(targets.items()),
            "in_degree": len(graph.sources(label)),
        })
    return rows


class SimpleVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "simple-visualizer"

    @property
    def display_name(self) -> str:
        return "Simple Adjacency View"

    def render_options_schema(self) -> dict:
        return {
            "poem": {
                "type": "str",
                "label": "Poem caption",
                "required": False
            }
        }

    def render(self, graph: Graph, **options) -> str:
        if len(graph) == 0:
            return "<html><body>Empty Graph</body></html>"

        rows = get_adjacency_rows(graph)
        max_weight = max((e.weight for e in graph.edges()), default=0)

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path), autoescape=select_autoescape(['html']))
        template = env.get_template('simple.html')

        return template.render(
            rows=rows,
            vertex_count=len(rows),
            edge_count=len(graph.edges()),
            max_weight=max_weight,
            poem=options.get("poem"),
        )
