from .solver import solve_ph, newton_ph, initial_guess, MAX_ITER, TOL
