"""Tests for squares, enums, pieces and the Move value object."""

import pytest

from gambit.core.enums import CastleSide, CastlingRights, Color, GameStatus, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import A1, E1, E2, E4, E7, E8, H8, Square, parse_square, square_name

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
WHITE_KING = Piece(Color.WHITE, PieceType.KING)
BLACK_ROOK = Piece(Color.BLACK, PieceType.ROOK)


class TestSquares:
    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert str(E4) == "e4"

    def test_parse(self) -> None:
        assert parse_square("e1") == Square(7, 4)
        assert parse_square("a8") == Square(0, 0)

    @pytest.mark.parametrize("name", ["", "e", "i1", "e9", "e10"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_offset_off_board(self) -> None:
        assert A1.offset(1, 0) is None
        assert A1.offset(-1, 1) == parse_square("b2")


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    @pytest.mark.parametrize("value", ["q", "Q", "queen", "QUEEN", PieceType.QUEEN])
    def test_parse_piece_type(self, value: PieceType | str) -> None:
        assert PieceType.parse(value) == PieceType.QUEEN

    def test_parse_piece_type_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece kind"):
            PieceType.parse("x")

    def test_castling_right_lookup(self) -> None:
        assert (
            CastlingRights.for_side(Color.BLACK, CastleSide.QUEEN)
            == CastlingRights.BLACK_QUEENSIDE
        )
        assert CastlingRights.for_color(Color.WHITE) == CastlingRights.WHITE_BOTH

    def test_game_status_strings(self) -> None:
        assert str(GameStatus.CHECKMATE) == "checkmate"
        assert GameStatus("stalemate") == GameStatus.STALEMATE


class TestPiece:
    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"

    def test_from_char(self) -> None:
        assert Piece.from_char("r") == BLACK_ROOK

    def test_enemy(self) -> None:
        assert BLACK_ROOK.is_enemy_of(Color.WHITE)
        assert not BLACK_ROOK.is_enemy_of(Color.BLACK)


class TestMove:
    def test_str(self) -> None:
        move = Move(E7, E8, WHITE_PAWN, promotion=PieceType.QUEEN)
        assert str(move) == "e7e8q"

    def test_capture_promotion_allowed(self) -> None:
        move = Move(E7, E8, WHITE_PAWN, BLACK_ROOK, promotion=PieceType.KNIGHT)
        assert move.is_capture
        assert move.promotion == PieceType.KNIGHT

    def test_castle_cannot_capture(self) -> None:
        with pytest.raises(ValueError, match="castling move"):
            Move(E1, parse_square("g1"), WHITE_KING, BLACK_ROOK, castle=CastleSide.KING)

    def test_en_passant_cannot_promote(self) -> None:
        with pytest.raises(ValueError, match="en passant"):
            Move(E7, E8, WHITE_PAWN, promotion=PieceType.QUEEN, en_passant=True)

    def test_double_push_cannot_capture(self) -> None:
        with pytest.raises(ValueError, match="double pawn push"):
            Move(E2, E4, WHITE_PAWN, BLACK_ROOK, double_push=True)

    def test_promotion_to_king_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            Move(E7, E8, WHITE_PAWN, promotion=PieceType.KING)
