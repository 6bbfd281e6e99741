from soar.query.graph import (
    count_edge_kinds,
    count_node_kinds,
    default_detail_level,
    edges_touching,
    find_node,
    iter_nodes,
    node_depth_map,
    visible_nodes,
    visible_nodes_with_depth,
)
