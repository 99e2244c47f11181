"""Evaluation of parsed Stack++ programs."""

from stackpp.evaluation.evaluator import evaluate, evaluate0
