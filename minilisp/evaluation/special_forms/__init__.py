"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Each handler receives the unevaluated argument forms, the current environment
and the evaluator, and checks the shape of its arguments before evaluating any
of them.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.set_form import set_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
}
