"""Tests for pseudo-legal destination generation."""

import pytest

from tactician.core.board import Board
from tactician.core.enums import Color, PieceType
from tactician.core.move import Move
from tactician.core.move_generator import MoveGenerator, available_destinations
from tactician.core.notation import STARTING_FEN, position_from_fen
from tactician.core.piece import Piece
from tactician.core.types import (
    A1, A2, A3, A4, A7, A8, B1, B2, B3, B4, B6, B8, C3, C4, C5, D1, D2, D3, D4,
    D5, D6, D7, D8, E1, E2, E3, E4, E5, F4, F5, F6, G4, G7, H4, H8,
    Square,
    all_squares,
    is_on_board,
)


def _board_with(*placements: tuple[Square, str]) -> Board:
    board = Board()
    for sq, char in placements:
        board[sq] = Piece.from_char(char)
    return board


ALL_PIECE_CHARS = "PNBRQKpnbrqk"


# ── Board edges and occupancy ────────────────────────────────────────────────


class TestInvariants:
    @pytest.mark.parametrize("char", list(ALL_PIECE_CHARS))
    def test_destinations_stay_on_board(self, char: str) -> None:
        for sq in all_squares():
            board = _board_with((sq, char))
            for dest in available_destinations(board, sq):
                assert is_on_board(dest.row, dest.col)
                assert dest != sq

    def test_never_lands_on_own_piece(self) -> None:
        board = Board.initial()
        for sq, piece in board.occupied():
            for dest in available_destinations(board, sq):
                target = board[dest]
                assert target is None or target.color != piece.color

    def test_empty_square_has_no_destinations(self) -> None:
        assert available_destinations(Board.initial(), E4) == []

    def test_generator_does_not_mutate_board(self) -> None:
        board = Board.initial()
        before = board.copy()
        MoveGenerator(board).generate_moves()
        assert board == before

    def test_order_is_deterministic(self) -> None:
        board = position_from_fen(
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq"
        ).board
        gen = MoveGenerator(board)
        assert gen.generate_moves() == gen.generate_moves()


# ── Sliding pieces ───────────────────────────────────────────────────────────


class TestSliders:
    def test_rook_on_empty_board_walks_rays_in_order(self) -> None:
        board = _board_with((D4, "R"))
        assert available_destinations(board, D4) == [
            D3, D2, D1,  # towards rank 1
            E4, F4, G4, H4,  # towards file h
            D5, D6, D7, D8,  # towards rank 8
            C4, B4, A4,  # towards file a
        ]

    def test_rook_stops_before_own_piece_and_on_enemy(self) -> None:
        board = _board_with((D4, "R"), (D6, "P"), (F4, "p"))
        assert available_destinations(board, D4) == [
            D3, D2, D1, E4, F4, D5, C4, B4, A4,
        ]

    def test_bishop_in_corner(self) -> None:
        board = _board_with((A1, "B"))
        dests = available_destinations(board, A1)
        assert len(dests) == 7
        assert dests[0] == B2
        assert dests[-1] == H8

    def test_queen_in_centre(self) -> None:
        board = _board_with((D4, "q"))
        assert len(available_destinations(board, D4)) == 27

    def test_queen_walks_diagonals_before_lines(self) -> None:
        board = _board_with((D4, "Q"), (C3, "P"), (E3, "P"), (C4, "P"), (E4, "P"))
        assert available_destinations(board, D4) == [
            C5, B6, A7, E5, F6, G7, H8,  # diagonals
            D3, D2, D1, D5, D6, D7, D8,  # lines
        ]


# ── Stepping pieces ──────────────────────────────────────────────────────────


class TestSteppers:
    def test_knight_from_starting_square(self) -> None:
        board = Board.initial()
        assert available_destinations(board, B1) == [A3, C3]

    def test_knight_jumps_over_pieces(self) -> None:
        board = _board_with((D4, "N"), (D5, "P"), (E4, "P"), (D3, "P"), (C4, "P"))
        assert len(available_destinations(board, D4)) == 8

    def test_king_in_corner(self) -> None:
        board = _board_with((A1, "K"))
        assert available_destinations(board, A1) == [B2, B1, A2]

    def test_king_takes_one_step_only(self) -> None:
        board = _board_with((D4, "k"))
        dests = available_destinations(board, D4)
        assert len(dests) == 8
        assert all(abs(d.row - D4.row) <= 1 and abs(d.col - D4.col) <= 1 for d in dests)


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawns:
    def test_white_double_step_from_start(self) -> None:
        board = Board.initial()
        assert available_destinations(board, E2) == [E3, E4]

    def test_black_double_step_from_start(self) -> None:
        board = Board.initial()
        assert available_destinations(board, D7) == [D6, D5]

    def test_single_step_off_start_rank(self) -> None:
        board = _board_with((E3, "P"))
        assert available_destinations(board, E3) == [E4]

    def test_blocked_pawn_cannot_jump(self) -> None:
        board = _board_with((E2, "P"), (E3, "n"))
        assert available_destinations(board, E2) == []

    def test_double_step_blocked_on_second_square(self) -> None:
        board = _board_with((E2, "P"), (E4, "n"))
        assert available_destinations(board, E2) == [E3]

    def test_pawn_never_captures_forward(self) -> None:
        board = _board_with((E4, "P"), (E5, "p"))
        assert available_destinations(board, E4) == []

    def test_diagonals_are_capture_only(self) -> None:
        board = _board_with((E4, "P"))
        assert available_destinations(board, E4) == [E5]

    def test_captures_follow_pushes_file_a_first(self) -> None:
        board = _board_with((E4, "P"), (D5, "p"), (F5, "n"))
        assert available_destinations(board, E4) == [E5, D5, F5]

    def test_no_capture_of_own_piece(self) -> None:
        board = _board_with((E4, "P"), (D5, "P"), (F5, "p"))
        assert available_destinations(board, E4) == [E5, F5]

    def test_edge_pawn_has_one_diagonal(self) -> None:
        board = _board_with((A2, "P"), (B3, "p"))
        assert available_destinations(board, A2) == [A3, A4, B3]

    def test_pawn_on_last_rank_is_stuck(self) -> None:
        board = _board_with((A8, "P"), (B8, "n"))
        assert available_destinations(board, A8) == []


# ── Whole-board generation ───────────────────────────────────────────────────


class TestGenerateMoves:
    def test_starting_position_counts(self) -> None:
        gen = MoveGenerator(position_from_fen(STARTING_FEN).board)
        assert len(gen.generate_moves(Color.WHITE)) == 20
        assert len(gen.generate_moves(Color.BLACK)) == 20
        assert len(gen.generate_moves()) == 40

    def test_origins_scanned_row_major(self) -> None:
        moves = MoveGenerator(Board.initial()).generate_moves(Color.WHITE)
        assert moves[:2] == [Move(A2, A3), Move(A2, A4)]

    def test_pinned_piece_still_moves(self) -> None:
        board = position_from_fen("4k3/8/8/8/4r3/8/4R3/4K3 w -").board
        assert D2 in available_destinations(board, E2)

    def test_king_may_step_into_attack(self) -> None:
        board = _board_with((E1, "K"), (D8, "r"))
        assert D1 in available_destinations(board, E1)

    def test_piece_types_covered(self) -> None:
        board = Board.initial()
        kinds: set[PieceType] = set()
        for move in MoveGenerator(board).generate_moves():
            piece = board[move.from_sq]
            assert piece is not None
            kinds.add(piece.piece_type)
        assert kinds == {PieceType.PAWN, PieceType.KNIGHT}
