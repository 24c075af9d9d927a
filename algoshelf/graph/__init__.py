"""Graph traversals, shortest paths, articulation points and bridges."""