"""Unit tests for the backtracking CSP solver."""

import pytest
from cspsudoku.core.board import SudokuBoard
from cspsudoku.core.node import SudokuNode
from cspsudoku.solvers import CSPSolver, SolverConfig, UnsupportedOrderingError, solve_string


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

SOLVED_4X4 = "1234341221434321"
TWO_BLANKS_4X4 = "0234341221434320"

# Row 0 needs a 3 in the top-right box, which already holds one
UNSOLVABLE_4X4 = "1200000300000000"

INFERENCE_CONFIGS = {
    "MAC+MRV": SolverConfig(use_mac=True, use_mrv=True),
    "FC+MRV": SolverConfig(use_mac=False, use_mrv=True),
    "MAC": SolverConfig(use_mac=True, use_mrv=False),
    "FC": SolverConfig(use_mac=False, use_mrv=False),
}


def solve(puzzle, config=None):
    board = SudokuBoard.from_string(puzzle)
    return CSPSolver(config, track_memory=False).solve(board)


class TestCSPSolver:
    """Tests for the CSP solver on 9x9 puzzles."""

    @pytest.mark.parametrize("name", ["MAC+MRV", "FC+MRV", "MAC"])
    def test_solve_puzzle(self, name):
        """Test solving a known puzzle."""
        solution, stats = solve(TEST_PUZZLE, INFERENCE_CONFIGS[name])

        assert stats.solved
        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string() == TEST_SOLUTION

    def test_stats_collected(self):
        """Test that stats are collected."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = CSPSolver()

        solution, stats = solver.solve(board)

        assert stats.time_seconds > 0
        assert stats.iterations > 0
        assert stats.nodes_explored > 0
        assert stats.arcs_processed > 0
        assert "MAC+MRV" in stats.algorithm

    def test_input_board_unchanged(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        CSPSolver().solve(board)
        assert board.to_string() == TEST_PUZZLE

    def test_invalid_puzzle(self):
        """Test solver on a puzzle with two 5s in the first row."""
        puzzle_str = "550070000600195000098000060800060003400803001700020006060000280000419005000080079"
        solution, stats = solve(puzzle_str)
        assert solution is None
        assert not stats.solved


class TestSmallBoards:
    """Tests for the 4x4 scenarios."""

    @pytest.mark.parametrize("name", sorted(INFERENCE_CONFIGS))
    def test_empty_board(self, name):
        solution, stats = solve("0" * 16, INFERENCE_CONFIGS[name])

        assert stats.solved
        assert solution.size == 4
        assert solution.is_solved()

    @pytest.mark.parametrize("name", sorted(INFERENCE_CONFIGS))
    def test_given_row_is_kept(self, name):
        solution, _ = solve("1234000000000000", INFERENCE_CONFIGS[name])

        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string()[:4] == "1234"

    @pytest.mark.parametrize("name", sorted(INFERENCE_CONFIGS))
    def test_conflicting_givens(self, name):
        solution, stats = solve("1100000000000000", INFERENCE_CONFIGS[name])
        assert solution is None
        assert not stats.solved

    def test_conflicting_givens_without_inference(self):
        solution, _ = solve("1100000000000000", SolverConfig(inference=False))
        assert solution is None

    def test_presolved_board_is_returned_unchanged(self):
        solution, stats = solve(SOLVED_4X4)

        assert stats.solved
        assert solution.to_string() == SOLVED_4X4
        assert stats.nodes_explored == 0

    def test_without_inference(self):
        """Plain backtracking still finds the completion of a nearly full board."""
        solution, stats = solve(TWO_BLANKS_4X4, SolverConfig(inference=False))

        assert stats.solved
        assert solution.to_string() == SOLVED_4X4
        assert stats.arcs_processed == 0

    def test_without_given_propagation(self):
        config = SolverConfig(propagate_givens=False)
        solution, _ = solve("1234000000000000", config)
        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string()[:4] == "1234"

    def test_solve_string(self):
        assert solve_string(TWO_BLANKS_4X4) == SOLVED_4X4
        assert solve_string(UNSOLVABLE_4X4) is None


class TestSoundness:
    """Propagation strength changes effort, never solvability."""

    PUZZLES = [
        "0" * 16,
        "1234000000000000",
        "0200000203404000",
        TWO_BLANKS_4X4,
        UNSOLVABLE_4X4,
        "1100000000000000",
        "0000000000000001",
        "1000020000300004",
    ]

    @pytest.mark.parametrize("puzzle", PUZZLES)
    def test_mac_and_forward_check_agree(self, puzzle):
        results = {}
        for name, config in INFERENCE_CONFIGS.items():
            solution, _ = solve(puzzle, config)
            if solution is not None:
                assert solution.is_solved()
                # Givens are preserved
                for i, c in enumerate(puzzle):
                    if c != "0":
                        assert solution.to_string()[i] == c
            results[name] = solution is not None

        assert len(set(results.values())) == 1

    def test_unsolvable_puzzle(self):
        for config in INFERENCE_CONFIGS.values():
            solution, _ = solve(UNSOLVABLE_4X4, config)
            assert solution is None


class TestDepthLimit:
    """Tests for the recursion depth guard."""

    def test_limit_causes_failure(self):
        """A puzzle needing two assignments fails under depth_limit=1."""
        limited, _ = solve(TWO_BLANKS_4X4, SolverConfig(depth_limit=1))
        unlimited, _ = solve(TWO_BLANKS_4X4, SolverConfig())

        assert limited is None
        assert unlimited is not None
        assert unlimited.to_string() == SOLVED_4X4

    def test_limit_equal_to_needed_depth_succeeds(self):
        solution, _ = solve(TWO_BLANKS_4X4, SolverConfig(depth_limit=2))
        assert solution is not None

    def test_default_limit_is_cells_plus_one(self):
        assert SolverConfig().resolve_depth_limit(9) == 82
        assert SolverConfig(depth_limit=5).resolve_depth_limit(9) == 5

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            SolverConfig(depth_limit=-1)


class TestBacktrackSearch:
    """Tests for the recursive driver itself."""

    def test_branches_do_not_mutate_parent(self):
        root = SudokuNode.from_string("0" * 16)
        before = {pos: set(values) for pos, values in root.domains.items()}

        solver = CSPSolver(track_memory=False)
        solver.limit = 17
        result = solver.backtrack_search(root, 0)

        assert result is not None
        assert result.board.is_solved()
        assert root.board.count_filled() == 0
        assert root.domains == before

    def test_fails_past_limit(self):
        root = SudokuNode.from_string("0" * 16)
        solver = CSPSolver(track_memory=False)
        solver.limit = 3
        assert solver.backtrack_search(root, 4) is None


class TestConfiguration:
    """Tests for configuration handling."""

    def test_lcv_fails_fast(self):
        with pytest.raises(UnsupportedOrderingError):
            solve("0" * 16, SolverConfig(use_lcv=True))

    def test_label(self):
        assert SolverConfig().label == "MAC+MRV"
        assert SolverConfig(use_mac=False, use_mrv=False).label == "FC"
        assert SolverConfig(inference=False).label == "NoInference+MRV"

    def test_dict_round_trip(self):
        config = SolverConfig(use_mac=False, depth_limit=10)
        assert SolverConfig.from_dict(config.to_dict()) == config

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            SolverConfig.from_dict({"use_forward": True})

    def test_separate_solvers_do_not_interfere(self):
        mac_solver = CSPSolver(SolverConfig(use_mac=True), track_memory=False)
        fc_solver = CSPSolver(SolverConfig(use_mac=False), track_memory=False)
        board = SudokuBoard.from_string("1234000000000000")

        mac_solution, _ = mac_solver.solve(board)
        fc_solution, _ = fc_solver.solve(board)

        assert mac_solver.config.use_mac
        assert not fc_solver.config.use_mac
        assert mac_solution.is_solved()
        assert fc_solution.is_solved()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
