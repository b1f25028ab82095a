from .carbonate import (saturation_states, revelle_factor, CarbonateSystemResult, carbonate_system,
                        carbonate_time_series, time_series_dataframe, DIC_PRIORITY, REVELLE_DELTA)
