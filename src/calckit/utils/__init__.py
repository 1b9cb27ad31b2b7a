"""Utility helpers shared by the CalcKit engines."""
