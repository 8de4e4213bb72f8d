"""
Domain layer package.

Contains pure business logic: conversion functions, value types
and the error taxonomy. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
