#!/usr/bin/env python3
"""
Validation tests for equilibrium constants and formulation tables.
Run with: python3 -m pytest pycarbsys/tests/ -v
Or standalone: python3 pycarbsys/tests/test_equilibrium.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pycarbsys.equilibrium as eq
from pycarbsys.classes import k12_method, InvalidFormulation
from pycarbsys.constants import PRESSURE_PARAMS

# =============================================================================
# K0 - Weiss (1974)
# =============================================================================

def test_k0_reference_values():
    """K0 against Weiss (1974) Table values"""
    k_fresh = eq.k0(25, 0)
    k_sea = eq.k0(25, 35)
    assert abs(k_fresh - 0.0340) / 0.0340 < 0.01, f"K0(25, 0) = {k_fresh}, expected ~0.0340"
    assert abs(k_sea - 0.02839) / 0.02839 < 0.005, f"K0(25, 35) = {k_sea}, expected ~0.02839"

def test_k0_decreases_with_temperature():
    ks = [eq.k0(t, 35) for t in (10, 25, 40)]
    assert ks[0] > ks[1] > ks[2], f"K0 should decrease with temperature: {ks}"

def test_k0_decreases_with_salinity():
    ks = [eq.k0(25, s) for s in (0, 20, 35)]
    assert ks[0] > ks[1] > ks[2], f"K0 should decrease with salinity: {ks}"

def test_fugacity_coefficient():
    """Fugacity coefficient slightly below unity at 1 atm"""
    phi = eq.fugacity_coeff(25)
    assert 0.99 < phi < 1.0, f"Fugacity coefficient = {phi}"

# =============================================================================
# K1 / K2
# =============================================================================

def test_k1_greater_than_k2_all_formulations():
    for method in k12_method:
        for degc, sal in ((5, 35), (25, 35), (25, 20)):
            k = eq.calculate_all_constants(degc, sal, k12method=method)
            assert k.K1 > 100 * k.K2, f"{method.name} at T={degc}, S={sal}: K1={k.K1}, K2={k.K2}"
            assert k.K1 / k.K2 < 1e5, f"{method.name}: K1/K2 = {k.K1 / k.K2} too large"

def test_ldk00_reference():
    """Lueker et al. (2000) at 25 degC, S=35"""
    k1, k2 = eq.k12(25, 35, 'LDK00')
    assert abs(-np.log10(k1) - 5.847) < 0.005, f"pK1 = {-np.log10(k1)}"
    assert abs(-np.log10(k2) - 8.966) < 0.005, f"pK2 = {-np.log10(k2)}"

def test_rrv93_magnitude():
    k1, k2 = eq.k12(25, 35, 'RRV93')
    assert 5.80 < -np.log10(k1) < 5.90, f"RRV93 pK1 = {-np.log10(k1)}"
    assert 8.88 < -np.log10(k2) < 8.98, f"RRV93 pK2 = {-np.log10(k2)}"

def test_plr18_reference():
    """Papadimitriou et al. (2018) at 0 degC, S=35: pK1 6.1267, pK2 9.3940"""
    k1, k2 = eq.k12(0, 35, 'PLR18')
    assert round(-np.log10(k1), 4) == 6.1267, f"PLR18 pK1 = {-np.log10(k1)}"
    assert round(-np.log10(k2), 4) == 9.3940, f"PLR18 pK2 = {-np.log10(k2)}"

def test_seawater_scale_formulation_converted_to_total():
    """SWS formulations are reported on the Total scale, which lies below SWS [H+]"""
    k1_sws, _ = eq.k12(25, 35, 'MGH06')
    k = eq.calculate_all_constants(25, 35, k12method='MGH06')
    assert k.K1 < k1_sws, "Total scale K1 should be smaller than the Seawater scale K1"
    assert abs(k.K1 / k1_sws - 1) < 0.03, f"Scale conversion ratio {k.K1 / k1_sws} unexpectedly large"

def test_method_accepts_enum_and_lowercase():
    a = eq.k12(25, 35, k12_method.WMW14)
    b = eq.k12(25, 35, 'wmw14')
    assert a == b, "Enum and string codes should select the same formulation"

def test_unknown_formulation():
    try:
        eq.calculate_all_constants(25, 35, k12method='XYZ99')
        assert False, "Should have raised InvalidFormulation"
    except InvalidFormulation as e:
        assert e.code == 'XYZ99', f"Error should name the code, got {e.code}"
        assert 'XYZ99' in str(e)

def test_unknown_kso4_formulation():
    try:
        eq.kso4(25, 35, 'D90b')
        assert False, "Should have raised InvalidFormulation"
    except ValueError:
        pass

# =============================================================================
# Other constants and totals
# =============================================================================

def test_kb_kw_magnitudes():
    kb = eq.kb(25, 35)
    kw = eq.kw(25, 35)
    assert abs(-np.log10(kb) - 8.597) < 0.01, f"pKB = {-np.log10(kb)}"
    assert abs(-np.log10(kw) - 13.22) < 0.02, f"pKW = {-np.log10(kw)}"

def test_ksp_calcite_above_aragonite_solubility():
    assert eq.ksp_aragonite(25, 35) > eq.ksp_calcite(25, 35), "Aragonite is more soluble than calcite"
    assert abs(-np.log10(eq.ksp_calcite(25, 35)) - 6.37) < 0.02

def test_kso4_kf_formulations():
    for method in ('D90a', 'KRCB77'):
        k = eq.kso4(25, 35, method)
        assert 0.03 < k < 0.3, f"KSO4 {method} = {k}"
    for method in ('DR79', 'PF87'):
        k = eq.kf(25, 35, method)
        assert 5e-4 < k < 1e-2, f"KF {method} = {k}"

def test_phosphate_silicate_constants():
    kp1, kp2, kp3 = eq.kp123(25, 35)
    assert kp1 > kp2 > kp3, f"KP1 > KP2 > KP3 expected: {kp1}, {kp2}, {kp3}"
    assert abs(-np.log10(kp2) - 5.97) < 0.05, f"pKP2 = {-np.log10(kp2)}"
    assert abs(-np.log10(eq.ksi(25, 35)) - 9.38) < 0.05, f"pKSi = {-np.log10(eq.ksi(25, 35))}"

def test_totals():
    assert abs(eq.total_boron(35) - 0.0004157) < 1e-12
    assert abs(eq.total_boron(35, 'KSK18') - (10.838 * 35 + 13.821) / 1e6) < 1e-15
    assert eq.total_boron(35, 'LKB10') > eq.total_boron(35, 'U74') > eq.total_boron(35, 'C65')
    assert abs(eq.total_sulfate(35) - 0.02824) < 1e-4, f"ST = {eq.total_sulfate(35)}"
    assert abs(eq.total_fluoride(35) - 6.83e-5) < 1e-6, f"FT = {eq.total_fluoride(35)}"

def test_calcium():
    assert abs(eq.calcium(35) - 0.01028) < 1e-4, f"Ca = {eq.calcium(35)}"
    assert eq.calcium(35, ca=10.0) == 0.01

# =============================================================================
# Pressure corrections
# =============================================================================

def test_pressure_correction_noop_at_surface():
    k = eq.k12(25, 35)[0]
    assert eq.pressure_correct(k, 25, 0, PRESSURE_PARAMS["K1"]) == k
    assert eq.k0_pressure_factor(25, 0) == 1.0

def test_pressure_correction_formula():
    """K_p = K exp(-(dV + dKT t)/RT P + 0.5 dK/RT P^2)"""
    params = PRESSURE_PARAMS["KB"]
    rt = 83.1451 * (10 + 273.15)
    dv = -29.48 - 2.608 * 10
    expected = 1e-9 * np.exp(-dv / rt * 100 + 0.5 * 0.1622 / rt * 100 ** 2)
    got = eq.pressure_correct(1e-9, 10, 100, params)
    assert abs(got / expected - 1) < 1e-12, f"Pressure corrected KB = {got}, expected {expected}"

def test_pressure_applied_to_constant_set():
    surface = eq.calculate_all_constants(2, 35, 0)
    deep = eq.calculate_all_constants(2, 35, 400)
    for name in ("K1", "K2", "KB", "KW", "KspCalcite", "KspAragonite"):
        expected = eq.pressure_correct(getattr(surface, name), 2, 400, PRESSURE_PARAMS[name])
        got = getattr(deep, name)
        assert abs(got / expected - 1) < 1e-12, f"{name} at 400 bar = {got}, expected {expected}"
    assert deep.KSO4 == surface.KSO4, "KSO4 is not pressure corrected"
    assert deep.K0 == surface.K0, "K0 only pressure corrected when requested"

def test_pressured_k0_decreases():
    ks = [eq.calculate_all_constants(10, 35, p, pressured_kco2=True).K0 for p in (0, 500, 1500, 3000)]
    assert ks[0] > ks[1] > ks[2] > ks[3], f"Pressured K0 should decrease with pressure: {ks}"
    unpressured = eq.calculate_all_constants(10, 35, 1500).K0
    assert unpressured == ks[0], "K0 only pressure corrected when requested"

# =============================================================================
# Formulation range checks
# =============================================================================

def test_range_check_statuses():
    rrv93 = eq.K12_FORMULATIONS['RRV93']
    assert eq.check_formulation_range(rrv93, 25, 35)['overall'] == 'optimal'
    check = eq.check_formulation_range(rrv93, 25, 45)
    assert check['salinity'] == 'acceptable' and check['overall'] == 'acceptable', f"{check}"
    check = eq.check_formulation_range(rrv93, -1, 50)
    assert check['temperature'] == 'acceptable' and check['overall'] == 'outside', f"{check}"

def test_range_check_all_salinities():
    check = eq.check_formulation_range(eq.BORON_FORMULATIONS['U74'], -2, 120)
    assert check['overall'] == 'optimal'

def test_recommended_formulations_sorted():
    df = eq.recommended_formulations(eq.K12_FORMULATIONS, 25, 35)
    assert len(df) == 18, f"Expected 18 K1/K2 formulations, got {len(df)}"
    order = df['status'].map({'optimal': 0, 'acceptable': 1, 'outside': 2}).tolist()
    assert order == sorted(order), f"Statuses not sorted: {df['status'].tolist()}"
    assert df.loc[df['code'] == 'M79', 'status'].item() == 'outside'
    assert df.iloc[0]['code'] == 'RRV93'

def test_valid_range_labels():
    assert eq.K12_FORMULATIONS['RRV93'].valid_range == 'S: 19-43, T: 2-35°C'
    assert eq.K12_FORMULATIONS['M79'].valid_range == 'S: 0, T: 0-50°C'
    assert eq.BORON_FORMULATIONS['C65'].valid_range == 'All salinities'

def test_formulation_tables_by_enum():
    assert eq.FORMULATION_TABLES[k12_method] is eq.K12_FORMULATIONS
    assert len(eq.FORMULATION_TABLES[k12_method]) == len(k12_method)
    for table in eq.FORMULATION_TABLES.values():
        for code, f in table.items():
            assert f.code == code, f"Table key {code} holds {f.code}"

def test_constant_set_to_dict():
    k = eq.calculate_all_constants(10, 30, pres=100, k12method='LDK00')
    d = k.to_dict()
    assert d['K1'] == k.K1 and d['KspAragonite'] == k.KspAragonite
    assert d['k12Formulation'] == 'LDK00'
    assert d['pressure'] == 100


if __name__ == '__main__':
    print("=" * 70)
    print("EQUILIBRIUM MODULE VALIDATION TESTS")
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
