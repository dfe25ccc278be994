from depgraph.cycles import find_cycles


def _paths(graph):
	return [list(c.path) for c in find_cycles(graph)]


def test_acyclic_graph_has_no_cycles():
	graph = {"a": ["b", "c"], "b": ["c", "d"], "c": ["d"], "e": ["a"]}
	assert _paths(graph) == []


def test_empty_graph():
	assert _paths({}) == []


def test_two_node_cycle():
	assert _paths({"A": ["B"], "B": ["A"]}) == [["A", "B", "A"]]


def test_self_import():
	assert _paths({"a": ["a"]}) == [["a", "a"]]


def test_longer_cycle_reported_from_ancestor():
	graph = {"entry": ["a"], "a": ["b"], "b": ["c"], "c": ["a"]}
	assert _paths(graph) == [["a", "b", "c", "a"]]


def test_one_record_per_back_edge():
	# Both b and c close a loop back to a.
	graph = {"a": ["b", "c"], "b": ["a"], "c": ["a"]}
	assert _paths(graph) == [["a", "b", "a"], ["a", "c", "a"]]


def test_duplicate_edges_produce_duplicate_records():
	assert _paths({"a": ["b"], "b": ["a", "a"]}) == [["a", "b", "a"], ["a", "b", "a"]]


def test_visited_node_is_not_a_cycle():
	# Diamond: d is reached twice but never while on the stack.
	graph = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []}
	assert _paths(graph) == []


def test_unreachable_components_are_covered():
	graph = {"a": ["b"], "x": ["y"], "y": ["x"]}
	assert _paths(graph) == [["x", "y", "x"]]


def test_dangling_target_is_a_node_without_edges():
	graph = {"a": ["tests/helper.ts"]}
	assert _paths(graph) == []


def test_deep_chain_does_not_recurse():
	n = 20000
	graph = {f"m{i}": [f"m{i + 1}"] for i in range(n)}
	graph[f"m{n}"] = ["m0"]
	cycles = find_cycles(graph)
	assert len(cycles) == 1
	assert cycles[0].path[0] == cycles[0].path[-1] == "m0"
	assert len(cycles[0].path) == n + 2
