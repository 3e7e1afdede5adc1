"""Move aggregation tests and perft, the gold standard for generator correctness.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from trekk.core.enums import Color, PieceKind
from trekk.core.move_generator import MoveGenerator, legal_moves
from trekk.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from trekk.core.perft import perft, perft_divide
from trekk.core.state import BoardState


class TestInitialPosition:
    def test_white_has_20_moves(self) -> None:
        moves = legal_moves(BoardState.initial())
        assert len(moves) == 20
        assert sum(m.kind == PieceKind.PAWN for m in moves) == 16
        assert sum(m.kind == PieceKind.KNIGHT for m in moves) == 4

    def test_black_has_20_moves(self) -> None:
        moves = legal_moves(BoardState.initial(), Color.BLACK)
        assert len(moves) == 20
        assert all(m.from_sq.row in (6, 7) for m in moves)

    def test_scan_order_is_row_major(self) -> None:
        moves = legal_moves(BoardState.initial())
        assert [str(m) for m in moves[:8]] == [
            "Sa3", "Sc3", "Sf3", "Sh3", "a3", "a4", "b3", "b4",
        ]
        origins = [m.from_sq.index for m in moves]
        assert origins == sorted(origins)

    def test_generation_does_not_change_state(self) -> None:
        state = BoardState.initial()
        legal_moves(state)
        assert position_to_fen(state) == STARTING_FEN


class TestGeneratorApi:
    def test_defaults_to_side_to_move(self) -> None:
        state = position_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 0 1")
        gen = MoveGenerator(state)
        assert all(m.kind == PieceKind.KING for m in gen.generate_legal_moves())
        assert gen.state is state

    def test_pseudo_legal_is_superset(self) -> None:
        state = position_from_fen("4r1k1/8/8/8/8/8/4N3/4K3 w - - 0 1")
        gen = MoveGenerator(state)
        legal = gen.generate_legal_moves()
        pseudo = gen.generate_pseudo_legal_moves()
        assert set(legal) < set(pseudo)

    def test_empty_list_with_check_is_checkmate(self) -> None:
        state = position_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        gen = MoveGenerator(state)
        assert gen.generate_legal_moves() == []
        assert gen.is_in_check()

    def test_empty_list_without_check_is_stalemate(self) -> None:
        state = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        gen = MoveGenerator(state)
        assert gen.generate_legal_moves() == []
        assert not gen.is_in_check()


class TestPerftHelpers:
    def test_depth_zero(self) -> None:
        assert perft(BoardState.initial(), 0) == 1

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            perft(BoardState.initial(), -1)

    def test_divide_sums_to_perft(self) -> None:
        out = perft_divide(BoardState.initial(), 2)
        assert len(out) == 20
        assert out["e2e4"] == 20
        assert sum(out.values()) == 400


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 2) == 400

    def test_depth_3(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 3) == 8_902

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 4) == 197_281


# ── Kiwipete (rich in tactics: castling, ep, promotions) ─────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 1) == 48

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 2) == 2_039

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 3) == 97_862


# ── Position 3: en-passant + promotion edge cases ───────────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPos3:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(POS3), 1) == 14

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(POS3), 2) == 191

    def test_depth_3(self) -> None:
        assert perft(position_from_fen(POS3), 3) == 2_812


# ── Position 4: mirrored, many promotions ────────────────────────────────────

POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"


class TestPerftPos4:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(POS4), 1) == 6

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(POS4), 2) == 264

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(position_from_fen(POS4), 3) == 9_467


# ── Position 5 ───────────────────────────────────────────────────────────────

POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftPos5:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(POS5), 1) == 44

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(POS5), 2) == 1_486

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(position_from_fen(POS5), 3) == 62_379
