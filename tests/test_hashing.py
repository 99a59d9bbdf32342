"""Tests for srmark.hashing."""
from srmark.hashing import cyrb53


class TestCyrb53:
    def test_known_digests(self) -> None:
        assert cyrb53("") == "bdcb81aee8d83"
        assert cyrb53("a") == "1c2ba782c97901"
        assert cyrb53("Q1::A1") == "c4ddf78ff81fe"
        assert cyrb53("#flashcards/science  Q2::A2") == "162d66af5f10df"

    def test_seed_changes_digest(self) -> None:
        assert cyrb53("a", seed=7) == "766340f251d09"
        assert cyrb53("Q1::A1", seed=7) != cyrb53("Q1::A1")

    def test_non_bmp_text_uses_utf16_code_units(self) -> None:
        assert cyrb53("emoji \U0001F600::x") == "131ad781b3a10b"
        assert cyrb53("مرحبا::سلام") == "1df1229b47d9fa"

    def test_fits_in_53_bits(self) -> None:
        for text in ("", "x", "a much longer question text::with an answer"):
            assert int(cyrb53(text), 16) < 2**53

    def test_no_collisions_across_corpus(self) -> None:
        corpus = {f"Q{i}::A{j}" for i in range(60) for j in range(60)}
        corpus |= {f"  Q{i}::A{i}" for i in range(200)}
        corpus |= {f"#deck/{i}  Q::A" for i in range(200)}
        digests = {cyrb53(text) for text in corpus}
        assert len(digests) == len(corpus)
