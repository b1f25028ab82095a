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

import logging
from dataclasses import dataclass, fields
from typing import Optional, Sequence, Mapping

import numpy as np
import pandas as pd
from tabulate import tabulate

from pycarbsys.classes import (param_type, ph_scale, k12_method, kso4_method, kf_method, boron_method,
                               MissingParameters, DuplicateParameterType, UnsupportedParameterPair)
from pycarbsys.validate import validate_methods
from pycarbsys.constants import UMOL
from pycarbsys.equilibrium import calculate_all_constants, calcium, EquilibriumConstants, FORMULATION_TABLES
from pycarbsys.phscale import convert_ph, ph_all_scales
from pycarbsys.solver import solve_ph
from pycarbsys.speciation import (MinorSpecies, minor_species, alkalinity, carbonate_fractions, co2_from_dic,
                                  hco3_from_dic, co3_from_dic, pco2_from_aqco2, dic_from_ta, dic_from_co2,
                                  dic_from_co3, dic_from_hco3, dic_from_pco2)

logger = logging.getLogger(__name__)

REVELLE_DELTA = 0.01  # DIC perturbation (µmol/kg)

# Order in which a supplied parameter is used to derive DIC once pH is known
DIC_PRIORITY = [param_type.DIC, param_type.TA, param_type.pCO2, param_type.aqCO2, param_type.CO3, param_type.HCO3]

_DIC_FROM = {
    param_type.DIC: lambda dic, ph, k: dic,
    param_type.TA: lambda ta, ph, k: dic_from_ta(ph, ta, k),
    param_type.pCO2: dic_from_pco2,
    param_type.aqCO2: dic_from_co2,
    param_type.CO3: dic_from_co3,
    param_type.HCO3: dic_from_hco3,
}

def saturation_states(co3: float, k, ca=None):
    """ Returns (omegaCalcite, omegaAragonite)
        co3: Carbonate ion (µmol/kg)
        k: EquilibriumConstants
        ca: Calcium (mmol/kg). Riley & Tongudai (1967) salinity ratio used if not specified
    """
    ion_product = calcium(k.salinity, ca) * co3 / UMOL
    return ion_product / k.KspCalcite, ion_product / k.KspAragonite

def revelle_factor(dic: float, ta: float, ph: float, k) -> float:
    """ Returns Revelle (buffer) factor, (dfCO2/fCO2) / (dDIC/DIC) at constant TA, by central difference
        dic, ta: DIC and total alkalinity (µmol/kg)
        ph: Current pH (Total), used as the starting point for both perturbed solutions
        k: EquilibriumConstants
        Returns NaN when DIC is too small to perturb
    """
    if dic <= REVELLE_DELTA:
        return np.nan
    fco2 = []
    for d in (dic + REVELLE_DELTA, dic - REVELLE_DELTA):
        ph_d = solve_ph(param_type.TA, ta, param_type.DIC, d, k, ph_guess=ph)
        fco2.append(co2_from_dic(d, ph_d, k) / k.K0)
    f_plus, f_minus = fco2
    return (f_plus - f_minus) / REVELLE_DELTA / ((f_plus + f_minus) / dic)

@dataclass
class CarbonateSystemResult:
    """ Fully derived carbonate system. Concentrations µmol/kg, pCO2 and fugacity µatm """
    pH: float
    pH_total: float
    pH_sws: float
    pH_free: float
    pH_nbs: float
    pHScale: str
    TA: float
    DIC: float
    pCO2: float
    fugacityCO2: float
    aqCO2: float
    HCO3: float
    CO3: float
    fCO2: float
    fHCO3: float
    fCO3: float
    omegaCalcite: float
    omegaAragonite: float
    revelleFactor: float
    minorSpecies: MinorSpecies
    K0: float
    K1: float
    K2: float
    KB: float
    KW: float
    constants: EquilibriumConstants
    formulationInfo: dict
    k12Formulation: str
    temperature: float
    salinity: float
    pressure: float
    time: Optional[object] = None

    def to_dict(self) -> dict:
        """ Flat dictionary. Minor species keep their own names, constants are prefixed 'constants.' """
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d.update(d.pop('minorSpecies').to_dict())
        d.update({f'constants.{key}': val for key, val in d.pop('constants').to_dict().items()})
        d.update({f'formulation.{key}': val for key, val in d.pop('formulationInfo').items()})
        return d

    def summary(self) -> str:
        """ Returns text table of the principal results """
        table = [
            [f'pH ({self.pHScale})', self.pH, ''],
            ['pH (total)', self.pH_total, ''],
            ['pH (sws)', self.pH_sws, ''],
            ['pH (free)', self.pH_free, ''],
            ['pH (nbs)', self.pH_nbs, ''],
            ['TA', self.TA, 'µmol/kg'],
            ['DIC', self.DIC, 'µmol/kg'],
            ['pCO2', self.pCO2, 'µatm'],
            ['fCO2', self.fugacityCO2, 'µatm'],
            ['CO2(aq)', self.aqCO2, 'µmol/kg'],
            ['HCO3-', self.HCO3, 'µmol/kg'],
            ['CO3--', self.CO3, 'µmol/kg'],
            ['Omega calcite', self.omegaCalcite, ''],
            ['Omega aragonite', self.omegaAragonite, ''],
            ['Revelle factor', self.revelleFactor, ''],
        ]
        return tabulate(table, headers=['Parameter', 'Value', 'Units'], floatfmt='.4f')

def _formulation_info(k) -> dict:
    return {
        'k12': FORMULATION_TABLES[k12_method][k.k12Formulation].name,
        'k0': 'Weiss (1974)',
        'kb': 'Dickson (1990)',
        'kw': 'Millero (1995)',
        'kso4': FORMULATION_TABLES[kso4_method][k.kso4Formulation].name,
        'kf': FORMULATION_TABLES[kf_method][k.kfFormulation].name,
        'ksp': 'Mucci (1983)',
        'calcium': 'Riley & Tongudai (1967)',
        'totalBoron': FORMULATION_TABLES[boron_method][k.boronFormulation].name,
    }

def _parse_params(par1_type, par1, par2_type, par2) -> dict:
    if par1_type is None or par2_type is None or par1 is None or par2 is None:
        raise MissingParameters("Two parameters (type and value) are required")
    try:
        t1, t2 = validate_methods(["paramtype", "paramtype"], [par1_type, par2_type])
    except ValueError as e:
        raise UnsupportedParameterPair(f"Unknown parameter type: {e}") from e
    if t1 == t2:
        raise DuplicateParameterType(f"Parameters must be different, both are {t1.name}")
    return {t1: par1, t2: par2}

def carbonate_system(
    par1_type,
    par1: float,
    par2_type,
    par2: float,
    degc: float = 25,
    sal: float = 35,
    pres: float = 0,
    ca: Optional[float] = None,
    tp: float = 0,
    tsi: float = 0,
    phscale='total',
    k12method='RRV93',
    kso4method='D90a',
    kfmethod='DR79',
    boronmethod='U74',
    pressured_kco2: bool = False,
    time=None,
) -> CarbonateSystemResult:
    """ Returns CarbonateSystemResult computed from any two of seven carbonate system parameters
        par1_type, par2_type: Parameter types, two different of 'pH', 'TA', 'DIC', 'pCO2', 'CO3', 'HCO3', 'aqCO2'
        par1, par2: Parameter values. pH on phscale, pCO2 in µatm, all others in µmol/kg
        degc: Temperature (deg C). Defaults to 25
        sal: Salinity (PSU). Defaults to 35
        pres: Gauge pressure (bar). Defaults to 0
        ca: Calcium (mmol/kg). Calculated from salinity if not specified
        tp: Total phosphate (µmol/kg). Defaults to 0
        tsi: Total silicate (µmol/kg). Defaults to 0
        phscale: Scale of any input pH, and of the returned 'pH' value.
                 'total', 'sws' (seawater), 'free' or 'nbs'. Defaults to 'total'
        k12method: K1/K2 formulation code. Defaults to 'RRV93'
                   'RRV93', 'GP89', 'H73_DM87', 'MCHP73_DM87', 'HM_DM87', 'MCHP73_GEOSECS', 'M79', 'CW98', 'LDK00',
                   'MM02', 'MPL02', 'MGH06', 'M10', 'WMW14', 'SLH20', 'SB21', 'MCHP73', 'PLR18'
        kso4method: 'D90a' (default) or 'KRCB77'
        kfmethod: 'DR79' (default) or 'PF87'
        boronmethod: 'U74' (default), 'LKB10', 'C65' or 'KSK18'
        pressured_kco2: Apply pressure correction to K0. Defaults to False
        time: Optional label echoed in the result
    """
    values = _parse_params(par1_type, par1, par2_type, par2)
    phscale = validate_methods(["phscale"], [phscale])

    k = calculate_all_constants(degc, sal, pres, k12method, kso4method, kfmethod, boronmethod, tp, tsi,
                                pressured_kco2)

    if param_type.pH in values:
        ph = convert_ph(values.pop(param_type.pH), phscale, ph_scale.total, k)
    else:
        (t1, v1), (t2, v2) = values.items()
        ph = solve_ph(t1, v1, t2, v2, k)

    given = next(t for t in DIC_PRIORITY if t in values)
    dic = _DIC_FROM[given](values[given], ph, k)
    ta = values[param_type.TA] if param_type.TA in values else alkalinity(ph, dic, k)

    aqco2 = co2_from_dic(dic, ph, k)
    co3 = co3_from_dic(dic, ph, k)
    pco2 = pco2_from_aqco2(aqco2, k)
    f_co2, f_hco3, f_co3 = carbonate_fractions(ph, k)
    omega_calc, omega_arag = saturation_states(co3, k, ca)
    phs = ph_all_scales(ph, ph_scale.total, k)

    return CarbonateSystemResult(
        pH=phs[phscale.name],
        pH_total=phs['total'],
        pH_sws=phs['sws'],
        pH_free=phs['free'],
        pH_nbs=phs['nbs'],
        pHScale=phscale.name,
        TA=ta,
        DIC=dic,
        pCO2=pco2,
        fugacityCO2=pco2 * k.fugacityCoefficient,
        aqCO2=aqco2,
        HCO3=hco3_from_dic(dic, ph, k),
        CO3=co3,
        fCO2=f_co2,
        fHCO3=f_hco3,
        fCO3=f_co3,
        omegaCalcite=omega_calc,
        omegaAragonite=omega_arag,
        revelleFactor=revelle_factor(dic, ta, ph, k),
        minorSpecies=minor_species(ph, k),
        K0=k.K0,
        K1=k.K1,
        K2=k.K2,
        KB=k.KB,
        KW=k.KW,
        constants=k,
        formulationInfo=_formulation_info(k),
        k12Formulation=k.k12Formulation,
        temperature=degc,
        salinity=sal,
        pressure=pres,
        time=time,
    )

def carbonate_time_series(inputs: Sequence[Mapping]) -> list:
    """ Returns list of results, one per input point, in input order.
        inputs: Sequence of dictionaries of carbonate_system keyword arguments, each optionally including 'time'
        Successful points return the flattened result dictionary with success=True.
        Failed points return {'time', 'success': False, 'error'} rather than stopping the series.
    """
    records = []
    for point in inputs:
        try:
            result = carbonate_system(**point)
        except Exception as e:
            logger.warning("Carbonate system failed at time %s: %s", point.get('time'), e)
            records.append({'time': point.get('time'), 'success': False, 'error': str(e)})
            continue
        record = result.to_dict()
        record['success'] = True
        records.append(record)
    return records

def time_series_dataframe(records: Sequence[Mapping]) -> pd.DataFrame:
    """ Returns DataFrame with one row per time series record. Failed points carry NaN results and their error """
    df = pd.DataFrame(list(records))
    if 'error' not in df.columns:
        df['error'] = None
    return df
