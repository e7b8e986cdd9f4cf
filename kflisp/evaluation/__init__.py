from kflisp.evaluation.evaluator import evaluate, eval_sexpr
from kflisp.evaluation.builtins import builtin_op
