import math

import numpy as np
import pytest

from local_rag.config import EmbeddingConfig
from local_rag.ingest.embedder import HashingEmbedder, embed, hash_token, similarity


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _signed_shift_hash(units: list[int]) -> int:
    """Mirror of the hash using signed 32-bit shifts and a final unsigned cast."""
    h = 2166136261
    for code in units:
        h = _to_int32(h) ^ code
        h = h + sum(_to_int32(h << shift) for shift in (1, 4, 7, 8, 24))
    return h & 0xFFFFFFFF


def test_hash_matches_fnv1a_reference_values() -> None:
    assert hash_token("") == 0x811C9DC5
    assert hash_token("a") == 0xE40C292C
    assert hash_token("foobar") == 0xBF9CF968


@pytest.mark.parametrize("token", ["fox", "quick", "x+y", "ünïcödé", "数学", "e=mc^2"])
def test_hash_matches_signed_shift_arithmetic(token: str) -> None:
    assert hash_token(token) == _signed_shift_hash([ord(ch) for ch in token])


def test_hash_iterates_utf16_code_units() -> None:
    # U+1D465 MATHEMATICAL ITALIC SMALL X is encoded as a surrogate pair.
    assert hash_token("\U0001d465") == _signed_shift_hash([0xD835, 0xDC65])


def test_embed_empty_text_is_zero_vector() -> None:
    vector = embed("")
    assert vector.shape == (384,)
    assert vector.dtype == np.float32
    assert not vector.any()


def test_embed_symbol_only_text_is_zero_vector() -> None:
    assert not embed("!!! ???").any()


def test_embed_is_unit_length_and_deterministic() -> None:
    first = embed("The quick brown fox jumps over the lazy dog.")
    second = embed("The quick brown fox jumps over the lazy dog.")

    assert first.shape == (384,)
    assert math.isclose(float(np.linalg.norm(first.astype(np.float64))), 1.0, abs_tol=1e-6)
    assert np.array_equal(first, second)


def test_embed_respects_dimensions() -> None:
    assert embed("fox", 16).shape == (16,)
    with pytest.raises(ValueError):
        embed("fox", 0)


def test_single_token_lands_on_hashed_index_with_hashed_sign() -> None:
    h = hash_token("fox")
    vector = embed("fox")

    expected_sign = 1.0 if ((h >> 1) & 1) == 0 else -1.0
    assert vector[h % 384] == expected_sign
    assert np.count_nonzero(vector) == 1


def test_repeated_token_normalizes_to_same_vector() -> None:
    assert np.array_equal(embed("fox fox fox"), embed("fox"))


def test_similarity_with_self_is_one() -> None:
    vector = embed("Data governance requires strict access control.")
    assert math.isclose(similarity(vector, vector), 1.0, abs_tol=1e-6)


def test_similarity_uses_shared_prefix() -> None:
    assert similarity([1.0, 2.0, 3.0], [1.0, 1.0]) == 3.0
    assert similarity([], [1.0]) == 0.0


def test_similarity_prefers_overlapping_text() -> None:
    query = embed("quick fox")
    related = embed("the quick brown fox")
    unrelated = embed("relational databases store rows")
    assert similarity(query, related) > similarity(query, unrelated)


def test_hashing_embedder_matches_functional_api() -> None:
    embedder = HashingEmbedder(EmbeddingConfig(dimensions=64))
    docs = embedder.embed_documents(["alpha beta", "gamma"])

    assert len(docs) == 2
    assert np.array_equal(docs[0], embed("alpha beta", 64))
    assert np.array_equal(embedder.embed_query("gamma"), embed("gamma", 64))


def test_hashing_embedder_rejects_invalid_dimensions() -> None:
    with pytest.raises(ValueError):
        HashingEmbedder(EmbeddingConfig(dimensions=0))


def test_hashing_embedder_defaults_to_configured_width() -> None:
    embedder = HashingEmbedder()

    assert embedder.config == EmbeddingConfig()
    assert embedder.embed_query("fox").shape == (384,)


def test_embedding_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError):
        EmbeddingConfig(dims=64)  # type: ignore[call-arg]
