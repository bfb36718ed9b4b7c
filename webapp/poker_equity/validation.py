"""
Input validation for the engine boundary.

The evaluator and simulator never check their inputs, so every request is
validated here before card ids reach them.
"""

MAX_PLAYERS = 9
MIN_PLAYERS = 2
VALID_BOARD_SIZES = (0, 3, 4, 5)


class SpotValidator:
    """
    Validates hole cards, board, player count and iteration count.
    """

    @staticmethod
    def validate_cards(hole, board):
        """
        Check card counts, id ranges and duplicates.

        Returns:
            tuple: (is_valid, error_message)
        """
        if len(hole) != 2:
            return False, f'Hole must contain exactly 2 cards, got {len(hole)}'
        if len(board) not in VALID_BOARD_SIZES:
            return False, f'Board must contain 0, 3, 4 or 5 cards, got {len(board)}'
        for card in list(hole) + list(board):
            if not isinstance(card, int) or isinstance(card, bool) or not 0 <= card < 52:
                return False, f'Invalid card id: {card!r}'
        if len(set(hole) | set(board)) != len(hole) + len(board):
            return False, 'Duplicate cards in hole and board'
        return True, None

    @staticmethod
    def validate_spot(hole, board, num_players, iterations, max_iterations=100000):
        """
        Validate a full simulation request.

        Args:
            hole (list): Hero hole card ids
            board (list): Community card ids
            num_players (int): Players at the table including hero
            iterations (int): Requested rollouts
            max_iterations (int): Upper bound on rollouts

        Returns:
            tuple: (is_valid, error_message)
                - is_valid (bool): True if the request can be simulated
                - error_message (str): Reason if invalid, None if valid
        """
        is_valid, error_msg = SpotValidator.validate_cards(hole, board)
        if not is_valid:
            return is_valid, error_msg

        if not isinstance(num_players, int) or not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
            return False, f'Invalid player count: {num_players}. Must be between {MIN_PLAYERS} and {MAX_PLAYERS}.'

        if not isinstance(iterations, int) or not 1 <= iterations <= max_iterations:
            return False, f'Invalid iteration count: {iterations}. Must be between 1 and {max_iterations}.'

        return True, None
