from enum import Enum


class NodeKind(str, Enum):
    """Architectural element kinds"""
    SERVICE = "service"        # microservice or standalone service
    MODULE = "module"          # code module/package within a service
    CLASS = "class"
    FUNCTION = "function"
    DATABASE = "database"
    CACHE = "cache"            # redis, memcached
    QUEUE = "queue"            # rabbitmq, kafka, sqs
    GATEWAY = "gateway"        # api gateway or load balancer
    EXTERNAL = "external"      # third-party api
    CONTAINER = "container"    # docker container or pod
    REGION = "region"          # cloud region
    CLUSTER = "cluster"        # kubernetes cluster or server group


class EdgeKind(str, Enum):
    """Relationship kinds between nodes"""
    HTTP = "http"
    GRPC = "grpc"
    WEBSOCKET = "websocket"
    DATABASE = "database"
    QUEUE = "queue"
    IMPORT = "import"
    INHERITANCE = "inheritance"
    COMPOSITION = "composition"
    EVENT = "event"


class DetailLevel(str, Enum):
    OVERVIEW = "overview"
    SERVICE = "service"
    MODULE = "module"
    CODE = "code"


# ---- Kind tables ----
# Every kind must appear here exactly once.

NODE_KIND_STYLE = {
    NodeKind.SERVICE: {
        "color": "#00d4ff",
        "shape": "box",
        "default_size": 2.0,
        "icon": "⬡",
        "layer": 4.0,
    },
    NodeKind.MODULE: {
        "color": "#9d4edd",
        "shape": "box",
        "default_size": 1.5,
        "icon": "◈",
        "layer": 2.0,
    },
    NodeKind.CLASS: {
        "color": "#ff6b6b",
        "shape": "octahedron",
        "default_size": 1.0,
        "icon": "◆",
        "layer": 1.0,
    },
    NodeKind.FUNCTION: {
        "color": "#ffd93d",
        "shape": "sphere",
        "default_size": 0.5,
        "icon": "ƒ",
        "layer": 0.5,
    },
    NodeKind.DATABASE: {
        "color": "#00ff88",
        "shape": "cylinder",
        "default_size": 2.0,
        "icon": "⛁",
        "layer": 0.0,
    },
    NodeKind.CACHE: {
        "color": "#ff9500",
        "shape": "torus",
        "default_size": 1.5,
        "icon": "◎",
        "layer": 1.0,
    },
    NodeKind.QUEUE: {
        "color": "#c77dff",
        "shape": "box",
        "default_size": 1.5,
        "icon": "≡",
        "layer": 5.0,
    },
    NodeKind.GATEWAY: {
        "color": "#48bfe3",
        "shape": "octahedron",
        "default_size": 2.5,
        "icon": "⬢",
        "layer": 8.0,
    },
    NodeKind.EXTERNAL: {
        "color": "#adb5bd",
        "shape": "sphere",
        "default_size": 1.5,
        "icon": "◇",
        "layer": 6.0,
    },
    NodeKind.CONTAINER: {
        "color": "#0077b6",
        "shape": "box",
        "default_size": 3.0,
        "icon": "▣",
        "layer": 3.0,
    },
    NodeKind.REGION: {
        "color": "#2a9d8f",
        "shape": "box",
        "default_size": 10.0,
        "icon": "⌘",
        "layer": 10.0,
    },
    NodeKind.CLUSTER: {
        "color": "#e76f51",
        "shape": "box",
        "default_size": 5.0,
        "icon": "⎔",
        "layer": 7.0,
    },
}

EDGE_KIND_STYLE = {
    EdgeKind.HTTP: {"color": "#00d4ff", "dash_pattern": None, "animated": True},
    EdgeKind.GRPC: {"color": "#9d4edd", "dash_pattern": None, "animated": True},
    EdgeKind.WEBSOCKET: {"color": "#00ff88", "dash_pattern": [0.5, 0.2], "animated": True},
    EdgeKind.DATABASE: {"color": "#00ff88", "dash_pattern": None, "animated": False},
    EdgeKind.QUEUE: {"color": "#c77dff", "dash_pattern": [0.3, 0.3], "animated": True},
    EdgeKind.IMPORT: {"color": "#6c757d", "dash_pattern": None, "animated": False},
    EdgeKind.INHERITANCE: {"color": "#ff6b6b", "dash_pattern": [0.2, 0.1], "animated": False},
    EdgeKind.COMPOSITION: {"color": "#ffd93d", "dash_pattern": None, "animated": False},
    EdgeKind.EVENT: {"color": "#ff9500", "dash_pattern": [0.1, 0.1], "animated": True},
}

# Traversal depth ceiling per detail level
DETAIL_DEPTH = {
    DetailLevel.OVERVIEW: 1,
    DetailLevel.SERVICE: 2,
    DetailLevel.MODULE: 3,
    DetailLevel.CODE: 4,
}

DEFAULT_LAYER = 3.0


def node_style(kind) -> dict:
    return NODE_KIND_STYLE[NodeKind(kind)]


def edge_style(kind) -> dict:
    return EDGE_KIND_STYLE[EdgeKind(kind)]


def depth_ceiling(level) -> int:
    return DETAIL_DEPTH[DetailLevel(level)]
