from .errors import (
    TautologyError,
    InvalidCharacterError,
    ParseError,
    UnexpectedToken,
    NoTokensLeft,
    RedundantToken,
    NestingTooDeep,
    VariableLimitExceeded,
)
from .lexer import Token, TokenKind, TokenStream, tokenize
from .expr import Expr, Sole, Const, UnOp, BinOp, UnaryOperator, BinaryOperator
from .parser import MAX_DEPTH, Parser, parse, generate
from .varenv import MAX_VARIABLES, VarEnv, Assignment, free_variables
from .evaluator import EvalResult, Tautology, NotTautology, evaluate, eval_expr, truth_table
from .oracle import check
