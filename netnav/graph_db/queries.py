"""Parameterized Cypher for embedding similarity over stored people."""

# Nearest neighbours of a person by the embedding already stored on their node.
# Asks for one extra hit because the source person always matches itself.
SIMILAR_PEOPLE = """
MATCH (source:Person {id: $person_id})
WHERE source.embedding IS NOT NULL
CALL db.index.vector.queryNodes($index_name, $count + 1, source.embedding)
YIELD node, score
WHERE node.id <> source.id
RETURN node.id AS id, score
ORDER BY score DESC
LIMIT $count
"""

VECTOR_INDEX_EXISTS = """
SHOW INDEXES YIELD name, type
WHERE name = $index_name AND type = 'VECTOR'
RETURN count(*) AS found
"""
