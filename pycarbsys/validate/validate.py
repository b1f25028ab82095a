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

from enum import Enum

from pycarbsys.classes import class_dic, InvalidFormulation

def validate_methods(names, variables):
    """ Converts method codes (str or Enum member) into their Enum members.
        Returns a single member if one method was passed, otherwise a list in the order given
        names: List of class_dic keys, eg ['k12method', 'kfmethod']
        variables: List of method codes, eg ['RRV93', 'DR79']
    """
    variables = list(variables)
    for m, method in enumerate(names):
        enum_class = class_dic[method]
        variable = variables[m]
        if isinstance(variable, enum_class):
            continue
        if isinstance(variable, Enum) or not isinstance(variable, str):
            raise InvalidFormulation(variable, method)
        try:
            variables[m] = enum_class[variable]  # Exact code first
        except KeyError:
            # Case insensitive fall back, eg 'rrv93' or 'TOTAL'
            matches = [member for member in enum_class if member.name.upper() == variable.upper()]
            if not matches:
                raise InvalidFormulation(variable, method) from None
            variables[m] = matches[0]
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
