#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyCarbSys - Seawater Carbonate System Equilibrium Calculations
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""
"""
Formulation metadata library.

Each selectable equilibrium constant regression carries its literature
source, the pH scale it was published on and the temperature / salinity
window of the calibration data. Range checking reports how far a set of
conditions sits from that window, it never rejects a calculation.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
import pandas as pd

from pycarbsys.classes import k12_method, kso4_method, kf_method, boron_method

INF = np.inf


@dataclass(frozen=True)
class Formulation:
    """Literature source and calibration window of a formulation."""
    code: str
    name: str
    description: str
    sal_range: Tuple[float, float]    # PSU
    temp_range: Tuple[float, float]   # deg C
    scale: str                        # pH scale the regression is published on

    @property
    def valid_range(self) -> str:
        if self.sal_range == (0, INF) and self.temp_range == (-INF, INF):
            return 'All salinities'
        if self.sal_range[0] == self.sal_range[1]:
            sal = f'S: {self.sal_range[0]:g}'
        else:
            sal = f'S: {self.sal_range[0]:g}-{self.sal_range[1]:g}'
        return f'{sal}, T: {self.temp_range[0]:g}-{self.temp_range[1]:g}°C'


def _f(code, name, description, sal_range, temp_range, scale):
    return Formulation(code, name, description, sal_range, temp_range, scale)


# ====================================================================
# Carbonic acid K1/K2
# ====================================================================
K12_FORMULATIONS: Dict[str, Formulation] = {f.code: f for f in [
    _f('RRV93', 'Roy et al. (1993)', 'Recommended for modern work', (19, 43), (2, 35), 'Total'),
    _f('GP89', 'Goyet & Poisson (1989)', 'Alternative formulation', (10, 50), (-1, 40), 'Seawater'),
    _f('H73_DM87', 'Hansson (1973) refit by Dickson & Millero (1987)', 'Historical data with modern refit',
       (20, 40), (2, 35), 'Seawater'),
    _f('MCHP73_DM87', 'Mehrbach (1973) refit by Dickson & Millero (1987)', 'GEOSECS data with modern refit',
       (20, 40), (2, 35), 'Seawater'),
    _f('HM_DM87', 'Hansson & Mehrbach refit by Dickson & Millero (1987)', 'Combined dataset refit',
       (20, 40), (2, 35), 'Seawater'),
    _f('MCHP73_GEOSECS', 'Mehrbach et al. (1973) - Original GEOSECS', 'Original GEOSECS formulation',
       (19, 43), (2, 35), 'NBS'),
    _f('M79', 'Millero (1979) - Freshwater', 'Pure water/freshwater formulation', (0, 0), (0, 50), 'Thermodynamic'),
    _f('CW98', 'Cai & Wang (1998)', 'Estuarine/low salinity formulation', (0, 40), (0.2, 30), 'NBS'),
    _f('LDK00', 'Lueker et al. (2000)', 'Widely used, high precision', (19, 43), (2, 35), 'Total'),
    _f('MM02', 'Mojica Prieto & Millero (2002)', 'Deep water formulation', (5, 42), (0, 45), 'Seawater'),
    _f('MPL02', 'Millero et al. (2002)', 'Simplified freshwater formulation', (0, 50), (1, 50), 'Seawater'),
    _f('MGH06', 'Millero et al. (2006)', 'Extended salinity range', (1, 50), (0, 50), 'Seawater'),
    _f('M10', 'Millero (2010)', 'Updated MGH06 formulation', (1, 50), (0, 50), 'Seawater'),
    _f('WMW14', 'Waters et al. (2014)', 'Updated for broad conditions', (1, 50), (0, 50), 'Seawater'),
    _f('SLH20', 'Sulpis et al. (2020)', 'High-pressure formulation', (30, 37), (0, 25), 'Total'),
    _f('SB21', 'Shao & Byrne (2021)', 'Latest K2 update', (19, 43), (15, 35), 'Total'),
    _f('MCHP73', 'Mehrbach et al. (1973) - Lueker refit', 'Alternative DM87 refit', (19, 43), (2, 35), 'Total'),
    _f('PLR18', 'Papadimitriou et al. (2018)', 'Formulation for low temperatures and high salinities',
       (33, 100), (-6, 25), 'Total'),
]}

# ====================================================================
# Bisulfate KSO4, hydrogen fluoride KF
# ====================================================================
KSO4_FORMULATIONS: Dict[str, Formulation] = {f.code: f for f in [
    _f('D90a', 'Dickson (1990a)', 'Standard formulation', (5, 45), (0, 45), 'Free'),
    _f('KRCB77', 'Khoo et al. (1977)', 'Alternative formulation', (5, 45), (0, 45), 'Free'),
]}

KF_FORMULATIONS: Dict[str, Formulation] = {f.code: f for f in [
    _f('DR79', 'Dickson & Riley (1979)', 'Standard formulation', (0, 45), (0, 45), 'Free'),
    _f('PF87', 'Perez & Fraga (1987)', 'Alternative formulation', (10, 40), (9, 33), 'Free'),
]}

# ====================================================================
# Total boron : salinity ratio
# ====================================================================
BORON_FORMULATIONS: Dict[str, Formulation] = {f.code: f for f in [
    _f('U74', 'Uppström (1974)', 'Standard formulation', (0, INF), (-INF, INF), ''),
    _f('LKB10', 'Lee et al. (2010)', 'Updated formulation', (0, INF), (-INF, INF), ''),
    _f('C65', 'Culkin (1965)', 'GEOSECS formulation', (0, INF), (-INF, INF), ''),
    _f('KSK18', 'Recent calibration (2018)', 'Latest formulation', (0, INF), (-INF, INF), ''),
]}

FORMULATION_TABLES = {
    k12_method: K12_FORMULATIONS,
    kso4_method: KSO4_FORMULATIONS,
    kf_method: KF_FORMULATIONS,
    boron_method: BORON_FORMULATIONS,
}

_STATUS_ORDER = {'optimal': 0, 'acceptable': 1, 'outside': 2}


def _value_status(value, lo, hi, tolerance):
    if lo <= value <= hi:
        return 'optimal'
    slack = (hi - lo) * tolerance  # Infinite windows never get here
    if lo - slack <= value <= hi + slack:
        return 'acceptable'
    return 'outside'


def check_formulation_range(formulation, degc, sal, tolerance=0.1):
    """Status of a set of conditions against a formulation calibration window.

    Parameters
    ----------
    formulation : Formulation
    degc : float
        Temperature (deg C).
    sal : float
        Salinity (PSU).
    tolerance : float
        Fraction of the window width outside the window still deemed 'acceptable'.

    Returns
    -------
    dict
        {'overall', 'salinity', 'temperature'} each one of 'optimal', 'acceptable'
        or 'outside'. Overall is the worse of the two.
    """
    sal_status = _value_status(sal, *formulation.sal_range, tolerance)
    temp_status = _value_status(degc, *formulation.temp_range, tolerance)
    overall = max(sal_status, temp_status, key=_STATUS_ORDER.get)
    return {'overall': overall, 'salinity': sal_status, 'temperature': temp_status}


def _reason(check):
    if check['overall'] == 'optimal':
        return 'Within valid range'
    if check['overall'] == 'acceptable':
        issues = [f'{k} slightly outside' for k in ('salinity', 'temperature') if check[k] == 'acceptable']
        return f"Acceptable ({', '.join(issues)})"
    issues = [k for k in ('salinity', 'temperature') if check[k] == 'outside']
    return f"Outside range ({', '.join(issues)})"


def recommended_formulations(formulations, degc, sal):
    """Ranks every formulation of a family against the given conditions.

    Parameters
    ----------
    formulations : dict
        One of the *_FORMULATIONS tables.
    degc, sal : float
        Temperature (deg C) and salinity (PSU).

    Returns
    -------
    pd.DataFrame
        Columns code, name, description, valid_range, status, reason. Sorted
        optimal, then acceptable, then outside, table order preserved within a status.
    """
    rows = []
    for code, formulation in formulations.items():
        check = check_formulation_range(formulation, degc, sal)
        rows.append({
            'code': code,
            'name': formulation.name,
            'description': formulation.description,
            'valid_range': formulation.valid_range,
            'status': check['overall'],
            'reason': _reason(check),
        })
    df = pd.DataFrame(rows)
    order = df['status'].map(_STATUS_ORDER)
    return df.iloc[np.argsort(order.to_numpy(), kind='stable')].reset_index(drop=True)
