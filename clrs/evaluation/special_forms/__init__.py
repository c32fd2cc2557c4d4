"""Registry of special forms for the clrs evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
"""

from clrs.types.symbol import Symbol
from clrs.evaluation.special_forms.quote_form import quote_form
from clrs.evaluation.special_forms.def_form import def_form
from clrs.evaluation.special_forms.fn_form import fn_form
from clrs.evaluation.special_forms.print_env_form import print_env_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("def"): def_form,
    Symbol("fn*"): fn_form,
    Symbol("print_env"): print_env_form,
}
