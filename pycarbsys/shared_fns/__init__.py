from .shared_fns import h_from_ph, ph_from_h, degc_to_k, sal_terms
