N_A = 6.022140857e23  # 1/mol
R_UNIVERSAL = 8.3144598  # J/mol/K
PA_TO_BAR = 1e-5


def assert_unit(actual: str, expected: str, what: str):
    if actual != expected:
        raise ValueError(f"Unit mismatch for {what}: got '{actual}', expected '{expected}'")
