"""
Core value model, extended arithmetic, elementary functions, and text/JSON codecs.

Everything here is pure and side-effect free: values are immutable and the
algebra/function objects hold only immutable configuration.
"""
