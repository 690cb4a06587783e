from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.apply import apply
