"""
Pot odds and call EV.

Turns an equity result plus the pot and the amount to call into the
break-even equity, the pot odds ratio and the expected value of calling.
"""

import logging

logger = logging.getLogger(__name__)


def pot_odds(pot, bet):
    """
    Break-even equity for a call.

    Formula: bet / (pot + bet)

    Args:
        pot (float): Current pot size
        bet (float): Amount to call

    Returns:
        float: Required equity as a fraction (0-1), or None if pot/bet are not positive
    """
    if not pot or not bet or pot <= 0 or bet <= 0:
        return None
    return bet / (pot + bet)


def pot_odds_ratio(pot, bet):
    """
    Pot odds as a decimal ratio, e.g. 3.0 means 3:1.

    Formula: (pot + bet) / bet
    """
    if not pot or not bet or pot <= 0 or bet <= 0:
        return None
    return (pot + bet) / bet


def call_ev(win, lose, pot, bet):
    """Expected value of calling: win * (pot + bet) - lose * bet."""
    return win * (pot + bet) - lose * bet


def evaluate_call(pot, bet, win, lose):
    """
    Summarise a calling decision.

    Args:
        pot (float): Current pot size
        bet (float): Amount to call
        win (float): Win frequency (0-1)
        lose (float): Lose frequency (0-1)

    Returns:
        dict or None: {
            'required_equity': float,  # 0-1
            'ratio': float,            # (pot + bet) / bet
            'ev': float,               # chips
            'positive_ev': bool,
            'decision': str            # '+EV Call' | '-EV Fold'
        }
        None when pot or bet is not positive.
    """
    required = pot_odds(pot, bet)
    if required is None:
        return None
    ev = call_ev(win, lose, pot, bet)
    positive = win > required
    logger.debug(f"[POT_ODDS] pot={pot} bet={bet} win={win:.3f} required={required:.3f} ev={ev:.2f}")
    return {
        'required_equity': required,
        'ratio': pot_odds_ratio(pot, bet),
        'ev': ev,
        'positive_ev': positive,
        'decision': '+EV Call' if positive else '-EV Fold',
    }
