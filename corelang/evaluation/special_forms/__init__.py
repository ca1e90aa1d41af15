"""Registry of special forms for the corelang evaluator.

Maps Expression node types to handler functions. The evaluator consults this
table for every compound node; literals and identifiers are handled inline.
"""

from corelang.types.expressions import Apply, Begin, BinaryOp, Define, If, Lambda, LetRec, Quote
from corelang.evaluation.special_forms.apply_form import apply_form
from corelang.evaluation.special_forms.binary_op_form import binary_op_form
from corelang.evaluation.special_forms.define_form import define_form
from corelang.evaluation.special_forms.if_form import if_form
from corelang.evaluation.special_forms.lambda_form import lambda_form
from corelang.evaluation.special_forms.letrec_form import letrec_form
from corelang.evaluation.special_forms.progn_form import progn_form
from corelang.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Define: define_form,
    LetRec: letrec_form,
    Quote: quote_form,
    BinaryOp: binary_op_form,
    If: if_form,
    Begin: progn_form,
    Lambda: lambda_form,
    Apply: apply_form,
}
