"""Pi-casso: generative grid art from the digits of pi.

The package is split into small, mostly pure modules:

* :mod:`pi_casso.digits` loads the embedded digit sequence.
* :mod:`pi_casso.palette` and :mod:`pi_casso.view` hold the immutable values
  edited by the user.
* :mod:`pi_casso.renderer` turns those values into pixels and back.
* :mod:`pi_casso.session` reduces user edits and palette generation into a new
  session snapshot; :mod:`pi_casso.generator` is the external AI call.
"""
