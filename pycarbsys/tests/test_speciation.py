#!/usr/bin/env python3
"""
Validation tests for carbonate and minor species speciation.
Run with: python3 -m pytest pycarbsys/tests/ -v
Or standalone: python3 pycarbsys/tests/test_speciation.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pycarbsys.speciation as sp
from pycarbsys.equilibrium import calculate_all_constants

K = calculate_all_constants(25, 35)
KNUT = calculate_all_constants(25, 35, tp=2.0, tsi=50.0)

# =============================================================================
# Carbonate species
# =============================================================================

def test_mass_balance():
    """CO2(aq) + HCO3 + CO3 = DIC, fractions sum to 1"""
    for ph in np.linspace(7.0, 9.5, 26):
        for dic in (500, 1500, 2100, 3000):
            total = sp.co2_from_dic(dic, ph, K) + sp.hco3_from_dic(dic, ph, K) + sp.co3_from_dic(dic, ph, K)
            assert abs(total / dic - 1) < 1e-6, f"pH {ph}, DIC {dic}: species sum {total}"
            fractions = sp.carbonate_fractions(ph, K)
            assert abs(sum(fractions) - 1) < 1e-6, f"pH {ph}: fractions sum {sum(fractions)}"

def test_inverse_relations():
    dic, ph = 2100.0, 8.05
    checks = [
        (sp.dic_from_co2, sp.co2_from_dic),
        (sp.dic_from_hco3, sp.hco3_from_dic),
        (sp.dic_from_co3, sp.co3_from_dic),
        (sp.dic_from_pco2, sp.pco2_from_dic),
    ]
    for inverse, forward in checks:
        back = inverse(forward(dic, ph, K), ph, K)
        assert abs(back / dic - 1) < 1e-12, f"{inverse.__name__}: {back} != {dic}"

def test_pco2_aqco2_relation():
    aq = sp.aqco2_from_pco2(400, K)
    assert abs(aq - 400 * K.K0 * K.fugacityCoefficient) < 1e-12
    assert abs(sp.pco2_from_aqco2(aq, K) - 400) < 1e-9

def test_species_dominance_with_ph():
    """HCO3 dominates at seawater pH, CO2 at low pH, CO3 at high pH"""
    f_co2, f_hco3, f_co3 = sp.carbonate_fractions(8.1, K)
    assert f_hco3 > f_co3 > f_co2, f"pH 8.1 fractions {f_co2}, {f_hco3}, {f_co3}"
    f_co2, f_hco3, f_co3 = sp.carbonate_fractions(4.5, K)
    assert f_co2 > 0.9, f"CO2 fraction at pH 4.5 = {f_co2}"
    f_co2, f_hco3, f_co3 = sp.carbonate_fractions(10.5, K)
    assert f_co3 > 0.9, f"CO3 fraction at pH 10.5 = {f_co3}"

# =============================================================================
# Alkalinity
# =============================================================================

def test_alkalinity_dic_inverse():
    for ph in (7.2, 7.8, 8.1, 8.6):
        ta = sp.alkalinity(ph, 2000, KNUT)
        dic = sp.dic_from_ta(ph, ta, KNUT)
        assert abs(dic / 2000 - 1) < 1e-12, f"pH {ph}: DIC from TA {dic}"

def test_alkalinity_increases_with_ph():
    tas = [sp.alkalinity(ph, 2000, K) for ph in (7.0, 7.5, 8.0, 8.5, 9.0)]
    assert all(a < b for a, b in zip(tas, tas[1:])), f"TA should increase with pH: {tas}"

def test_alkalinity_scenario():
    """pH 8.1, DIC 2127 at 25 degC, S=35 gives TA close to 2500"""
    ta = sp.alkalinity(8.1, 2127, K)
    assert 2450 < ta < 2550, f"TA = {ta}"

def test_nutrients_add_alkalinity():
    assert sp.alkalinity(8.1, 2000, KNUT) > sp.alkalinity(8.1, 2000, K)

# =============================================================================
# Minor species
# =============================================================================

def test_borate_and_hydroxide():
    ms = sp.minor_species(8.1, K)
    assert 80 < ms.borate < 120, f"Borate = {ms.borate} µmol/kg"
    assert 3 < ms.hydroxide < 12, f"Hydroxide = {ms.hydroxide} µmol/kg"
    assert ms.hydrogenFree < 0.01, f"Free hydrogen = {ms.hydrogenFree} µmol/kg"

def test_phosphate_silicate_mass_balance():
    ms = sp.minor_species(8.1, KNUT)
    p_sum = ms.H3PO4 + ms.H2PO4 + ms.HPO4 + ms.PO4
    si_sum = ms.SiOH4 + ms.SiOOH3
    assert abs(p_sum - 2.0) < 1e-9, f"Phosphate species sum {p_sum}"
    assert abs(si_sum - 50.0) < 1e-9, f"Silicate species sum {si_sum}"
    assert ms.HPO4 > ms.H2PO4, "HPO4 dominates at seawater pH"
    assert ms.SiOH4 > ms.SiOOH3, "Si(OH)4 dominates at seawater pH"

def test_no_nutrients_zero_species():
    ms = sp.minor_species(8.1, K)
    for name in ('H3PO4', 'H2PO4', 'HPO4', 'PO4', 'SiOH4', 'SiOOH3'):
        assert getattr(ms, name) == 0, f"{name} should be zero without nutrients"

def test_sulfate_fluoride_species_low_ph():
    """Bisulfate and HF become significant only at low pH"""
    low = sp.minor_species(3.5, K)
    high = sp.minor_species(8.1, K)
    assert low.bisulfate > 100 * high.bisulfate
    assert low.hydrogenFluoride > 100 * high.hydrogenFluoride
    assert low.alkalinity() < 0, "Minor alkalinity should be negative at pH 3.5"

def test_minor_species_to_dict():
    ms = sp.minor_species(8.1, KNUT)
    d = ms.to_dict()
    assert set(d) == {'borate', 'hydroxide', 'hydrogenFree', 'bisulfate', 'hydrogenFluoride', 'H3PO4', 'H2PO4',
                      'HPO4', 'PO4', 'SiOH4', 'SiOOH3'}
    assert d['borate'] == ms.borate and d['SiOOH3'] == ms.SiOOH3


if __name__ == '__main__':
    print("=" * 70)
    print("SPECIATION MODULE VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
