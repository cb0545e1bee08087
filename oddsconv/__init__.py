"""Betting odds in American, decimal and fractional form: conversion, parsing,
validation, market helpers and a command-line calculator."""

__version__ = "0.1.0"
__all__ = ["betting", "calculator", "errors", "market", "odds", "parsing"]