"""Generation of textual LLVM IR from a checked syntax tree."""

from __future__ import annotations

import io
import os
from typing import Optional, Union

from melpc.irtypes import (
    clean_identifier,
    get_llvm_binary_op,
    get_llvm_icmp_pred,
    get_llvm_type_from_ast,
    token_type_to_op_string,
)
from melpc.nodes import (
    Assignment,
    BinaryOp,
    Call,
    ExprStmt,
    Function,
    Identifier,
    If,
    Literal,
    Node,
    Program,
    Return,
    UnaryOp,
    VarDecl,
    While,
)
from melpc.tokens import TokenType

_MODULE_HEADER = (
    "; MELP Stage 2 - Generated LLVM IR\n\n"
    'target datalayout = "e-m:e-p270:32:32-p271:32:32-p272:64:64-'
    'i64:64-f80:128-n8:16:32:64-S128"\n'
    'target triple = "x86_64-pc-linux-gnu"\n\n'
    "; External declarations\n"
    "declare i32 @printf(i8*, ...)\n"
    "declare i32 @scanf(i8*, ...)\n\n"
)

_ARITHMETIC = frozenset(
    {TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH, TokenType.MOD}
)
_COMPARISON = frozenset(
    {
        TokenType.LESS,
        TokenType.GREATER,
        TokenType.LESS_EQUAL,
        TokenType.GREATER_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.NOT_EQUAL,
    }
)
_LOGICAL = frozenset({TokenType.AND, TokenType.OR})


class CodegenError(Exception):
    """Raised when IR cannot be generated."""


class CodeGenerator:
    """Emits LLVM IR for a program into an in-memory buffer.

    Registers are numbered afresh in each function, starting after its
    parameters; label numbers keep increasing across the whole module.
    """

    def __init__(self) -> None:
        self._out = io.StringIO()
        self.register_counter = 0
        self.label_counter = 1

    def _emit(self, text: str) -> None:
        self._out.write(text)

    def next_register(self) -> str:
        """Return a fresh virtual register name such as ``%3``."""
        name = f"%{self.register_counter}"
        self.register_counter += 1
        return name

    def next_label(self) -> str:
        """Return a fresh label name such as ``label2``."""
        name = f"label{self.label_counter}"
        self.label_counter += 1
        return name

    def getvalue(self) -> str:
        """Return all IR emitted so far."""
        return self._out.getvalue()

    # Expressions

    def expression(self, expr: Optional[Node]) -> str:
        """Emit code for an expression and return the operand holding its value."""
        match expr:
            case Literal():
                return self._literal(expr)
            case Identifier():
                reg = self.next_register()
                name = clean_identifier(expr.name)
                self._emit(f"  {reg} = load i64, i64* %{name}\n")
                return reg
            case BinaryOp():
                return self._binary_op(expr)
            case UnaryOp():
                return self._unary_op(expr)
            case Call():
                return self._call(expr)
            case _:
                return "0"

    @staticmethod
    def _literal(literal: Literal) -> str:
        if literal.literal_type is TokenType.NUMBER:
            return str(literal.value)
        if literal.literal_type is TokenType.TRUE:
            return "true"
        if literal.literal_type is TokenType.FALSE:
            return "false"
        return "0"

    def _binary_op(self, node: BinaryOp) -> str:
        left = self.expression(node.left)
        right = self.expression(node.right)
        op_str = token_type_to_op_string(node.op)
        reg = self.next_register()
        if node.op in _ARITHMETIC:
            self._emit(f"  {reg} = {get_llvm_binary_op(op_str, 'i64')} i64 {left}, {right}\n")
        elif node.op in _COMPARISON:
            self._emit(f"  {reg} = icmp {get_llvm_icmp_pred(op_str)} i64 {left}, {right}\n")
        elif node.op in _LOGICAL:
            self._emit(f"  {reg} = {get_llvm_binary_op(op_str, 'i1')} i1 {left}, {right}\n")
        else:
            self._emit(f"  {reg} = add i64 {left}, {right}\n")
        return reg

    def _unary_op(self, node: UnaryOp) -> str:
        operand = self.expression(node.operand)
        reg = self.next_register()
        if node.op is TokenType.NOT:
            self._emit(f"  {reg} = xor i1 {operand}, true\n")
        else:
            self._emit(f"  {reg} = sub i64 0, {operand}\n")
        return reg

    def _call(self, node: Call) -> str:
        name = clean_identifier(node.name)
        args = [self.expression(arg) for arg in node.arguments]
        reg = self.next_register()
        arg_list = ", ".join(f"i64 {arg}" for arg in args)
        self._emit(f"  {reg} = call i64 @{name}({arg_list})\n")
        return reg

    # Statements

    def statement(self, stmt: Optional[Node]) -> None:
        """Emit code for one statement; unknown nodes emit nothing."""
        match stmt:
            case Return():
                if stmt.expression is not None:
                    result = self.expression(stmt.expression)
                    self._emit(f"  ret i64 {result}\n")
                else:
                    self._emit("  ret void\n")
            case VarDecl():
                self._var_decl(stmt)
            case Assignment():
                name = clean_identifier(stmt.name)
                value = self.expression(stmt.value)
                self._emit(f"  store i64 {value}, i64* %{name}\n")
            case If():
                self._if(stmt)
            case While():
                self._while(stmt)
            case ExprStmt():
                self.expression(stmt.expression)

    def _var_decl(self, node: VarDecl) -> None:
        name = clean_identifier(node.name)
        llvm_type = get_llvm_type_from_ast(node.type)
        self._emit(f"  %{name} = alloca {llvm_type}\n")
        if node.initializer is not None:
            value = self.expression(node.initializer)
            self._emit(f"  store {llvm_type} {value}, {llvm_type}* %{name}\n")

    def _if(self, node: If) -> None:
        number = self.label_counter
        self.label_counter += 1
        then_label, else_label, end_label = (
            f"then{number}",
            f"else{number}",
            f"endif{number}",
        )
        cond = self.expression(node.condition)
        false_target = else_label if node.else_body else end_label
        self._emit(f"  br i1 {cond}, label %{then_label}, label %{false_target}\n")

        self._emit(f"\n{then_label}:\n")
        for stmt in node.then_body:
            self.statement(stmt)
        self._emit(f"  br label %{end_label}\n")

        if node.else_body:
            self._emit(f"\n{else_label}:\n")
            for stmt in node.else_body:
                self.statement(stmt)
            self._emit(f"  br label %{end_label}\n")

        self._emit(f"\n{end_label}:\n")

    def _while(self, node: While) -> None:
        number = self.label_counter
        self.label_counter += 1
        loop_label, body_label, end_label = (
            f"loop{number}",
            f"body{number}",
            f"endloop{number}",
        )
        self._emit(f"  br label %{loop_label}\n")
        self._emit(f"\n{loop_label}:\n")
        cond = self.expression(node.condition)
        self._emit(f"  br i1 {cond}, label %{body_label}, label %{end_label}\n")
        self._emit(f"\n{body_label}:\n")
        for stmt in node.body:
            self.statement(stmt)
        self._emit(f"  br label %{loop_label}\n")
        self._emit(f"\n{end_label}:\n")

    # Functions and programs

    def function(self, func: Function) -> None:
        """Emit a function definition, adding a default return if the body lacks one."""
        name = clean_identifier(func.name)
        return_type = get_llvm_type_from_ast(func.return_type)
        self.register_counter = len(func.parameters)

        signature = ", ".join(
            f"{get_llvm_type_from_ast(param.type)} %{index}"
            for index, param in enumerate(func.parameters)
        )
        self._emit(f"define {return_type} @{name}({signature}) {{\n")
        self._emit("entry:\n")

        for index, param in enumerate(func.parameters):
            param_name = clean_identifier(param.name)
            param_type = get_llvm_type_from_ast(param.type)
            self._emit(f"  %{param_name} = alloca {param_type}\n")
            self._emit(f"  store {param_type} %{index}, {param_type}* %{param_name}\n")

        for stmt in func.body:
            self.statement(stmt)

        if not func.body or not isinstance(func.body[-1], Return):
            if return_type == "void":
                self._emit("  ret void\n")
            else:
                self._emit(f"  ret {return_type} 0\n")

        self._emit("}\n\n")

    def program(self, program: Program) -> None:
        """Emit the module header followed by every function."""
        if not isinstance(program, Program):
            raise CodegenError("Invalid AST: expected AST_PROGRAM node")
        self._emit(_MODULE_HEADER)
        for func in program.functions:
            self.function(func)


def generate_ir(ast: Optional[Program]) -> str:
    """Return the LLVM IR module for a program tree."""
    if ast is None:
        raise CodegenError("NULL AST provided")
    generator = CodeGenerator()
    generator.program(ast)
    return generator.getvalue()


def generate_code(ast: Optional[Program], output_file: Union[str, os.PathLike, None]) -> None:
    """Write the LLVM IR module for a program tree to ``output_file``."""
    if ast is None:
        raise CodegenError("NULL AST provided")
    if output_file is None:
        raise CodegenError("NULL output file provided")
    try:
        handle = open(output_file, "w", encoding="utf-8")
    except OSError as exc:
        raise CodegenError(f"Failed to open output file: {output_file}") from exc
    with handle:
        handle.write(generate_ir(ast))