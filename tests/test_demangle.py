#!/usr/bin/python

import logging
import unittest

from sndemangle.scala_native import (
    DemangleError,
    InvalidLength,
    RecursionLimitExceeded,
    TrailingInput,
    UnexpectedChar,
    UnexpectedEnd,
    UnknownPrimitiveCode,
    UnknownTag,
    demangle,
)

LOG = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)-15s %(message)s")
logging.disable(logging.CRITICAL)

# symbols emitted by the Scala Native compiler and their canonical rendering
REFERENCE_SYMBOLS = [
    ("_ST10__dispatch", "__dispatch"),
    (
        "_SM42sttp.model.headers.CacheDirective$MinFreshD12productArityiEO",
        "sttp.model.headers.CacheDirective$MinFresh.productArity(): Int",
    ),
    (
        "_SM42scala.scalanative.runtime.SymbolFormatter$D10inBounds$1L32scala.scalanative.unsigned.ULongizEPT42scala.scalanative.runtime.SymbolFormatter$",
        "scala.scalanative.runtime.SymbolFormatter$.<private[scala.scalanative.runtime.SymbolFormatter$]>inBounds$1(scala.scalanative.unsigned.ULong, Int): Boolean",
    ),
    (
        "_SM41scalaboot.template.scalatemplate$package$D10$anonfun$3L26scalaboot.template.ContextL15scala.Function1L23java.lang.StringBuilderL31scalaboot.template.UnsafeCursorL23scalaboot.template.MoveuEPT41scalaboot.template.scalatemplate$package$",
        "scalaboot.template.scalatemplate$package$.<private[scalaboot.template.scalatemplate$package$]>$anonfun$3(scalaboot.template.Context, scala.Function1, java.lang.StringBuilder, scalaboot.template.UnsafeCursor, scalaboot.template.Move): Unit",
    ),
    (
        "_SM33scala.scalanative.unsafe.package$D11fromCStringL28scala.scalanative.unsafe.PtrL24java.nio.charset.CharsetL16java.lang.StringEO",
        "scala.scalanative.unsafe.package$.fromCString(scala.scalanative.unsafe.Ptr, java.nio.charset.Charset): String",
    ),
    ("_SM17java.lang.IntegerD7compareiiiEo", "java.lang.Integer.compare(Int, Int): Int"),
]


class DemangleTestSuite(unittest.TestCase):

    def testReferenceSymbols(self):
        for mangled, expected in REFERENCE_SYMBOLS:
            self.assertEqual(demangle(mangled), expected)

    def testMembers(self):
        self.assertEqual(demangle("_SM5StatsF5countO"), "Stats.count")
        self.assertEqual(demangle("_SM3FooRiL16java.lang.StringE"), "Foo.<init>(Int, String)")
        self.assertEqual(demangle("_SM3FooIE"), "Foo.<clinit>")
        self.assertEqual(demangle("_SM3FooC6printf"), "Foo.printf")
        self.assertEqual(demangle("_SM3FooG4type"), "Foo.type")
        self.assertEqual(demangle("_SM3FooP3barizE"), "Foo.bar(Int): Boolean")
        self.assertEqual(demangle("_SM3FooKD3barizEOjuE"), "Foo.bar(Long): Unit")

    def testTypes(self):
        self.assertEqual(demangle("_SM3FooD3barLALAi__uEO"), "Foo.bar(Int[][]): Unit")
        self.assertEqual(demangle("_SM3FooD3barAi16_uEO"), "Foo.bar(CArray[Int, 16]): Unit")
        self.assertEqual(demangle("_SM3FooD3barRiizEuEO"), "Foo.bar((Int, Int) => Boolean): Unit")
        self.assertEqual(demangle("_SM3FooD3barR_vuEO"), "Foo.bar(Ptr, ...): Unit")
        self.assertEqual(demangle("_SM3FooD3barSijEuEO"), "Foo.bar({Int, Long}): Unit")
        self.assertEqual(demangle("_SM3FooD3barLX3BazX3QuxuEO"), "Foo.bar(Baz, Qux): Unit")
        self.assertEqual(demangle("_SM3FooD3barL31scala.collection.immutable.ListuEO"), "Foo.bar(List): Unit")

    def testOperators(self):
        self.assertEqual(demangle("_SM3FooD5$plusiiEO"), "Foo.+(Int): Int")
        self.assertEqual(demangle("_SM3FooD12$colon$colonL3FooL3FooEO"), "Foo.::(Foo): Foo")
        self.assertEqual(demangle("_SM3FooD14$less$eq$qmarkiEO"), "Foo.<=?(): Int")
        self.assertEqual(demangle("_ST12caf$u00E9Baz"), "caféBaz")

    def testBytesInput(self):
        self.assertEqual(demangle(b"_ST3Foo"), "Foo")
        with self.assertRaises(UnexpectedChar) as ctx:
            demangle(b"_ST3\xffoo")
        self.assertEqual(ctx.exception.offset, 4)
        # offsets count bytes for bytes input, characters for text input
        with self.assertRaises(UnknownTag) as ctx:
            demangle("_SM4caféQ".encode("utf-8"))
        self.assertEqual(ctx.exception.offset, 9)
        self.assertEqual(ctx.exception.token, "Q")
        with self.assertRaises(UnknownTag) as ctx:
            demangle("_SM4caféQ")
        self.assertEqual(ctx.exception.offset, 8)

    def testEmptyInput(self):
        with self.assertRaises(UnexpectedEnd) as ctx:
            demangle("")
        self.assertEqual(ctx.exception.offset, 0)
        self.assertEqual(ctx.exception.production, "mangled-name")
        self.assertIsNone(ctx.exception.token)

    def testErrors(self):
        cases = [
            ("foo", UnexpectedChar, 0, "mangled-name", "fo"),
            ("_SX", UnknownTag, 2, "defn-name", "X"),
            ("_ST10abc", InvalidLength, 3, "owner-name", "10"),
            ("_ST3Fooxyz", TrailingInput, 7, "mangled-name", "xyz"),
            ("_SM3FooD3barqEO", UnknownPrimitiveCode, 12, "type-name", "q"),
            ("_SM3FooD3barQEO", UnknownTag, 12, "type-name", "Q"),
            ("_SM3FooD3bariE", UnexpectedEnd, 14, "scope", None),
            ("_SM3FooD3barEO", UnexpectedChar, 12, "type-list", "E"),
            ("_SM3FooD3barLAi", UnexpectedEnd, 15, "nullable-type-name", None),
            ("_SM3FooD3barAi16uEO", UnexpectedChar, 16, "type-name", "u"),
            ("_SM3FooZ", UnknownTag, 7, "sig-name", "Z"),
            ("_SM3FooF3barX", UnknownTag, 12, "scope", "X"),
            ("_SM3FooD3barLQuEO", UnknownTag, 13, "nullable-type-name", "Q"),
        ]
        for mangled, error_type, offset, production, token in cases:
            with self.assertRaises(error_type, msg=mangled) as ctx:
                demangle(mangled)
            self.assertEqual(ctx.exception.offset, offset, mangled)
            self.assertEqual(ctx.exception.production, production, mangled)
            self.assertEqual(ctx.exception.token, token, mangled)
            self.assertEqual(ctx.exception.given_str, mangled)

    def testErrorMessage(self):
        with self.assertRaises(DemangleError) as ctx:
            demangle("_ST10abc")
        self.assertEqual(
            str(ctx.exception),
            "[_ST10abc] Invalid length prefix 10 with 3 characters remaining in <owner-name> at offset 3 (found '10')",
        )

    def testRecursionLimit(self):
        with self.assertRaises(RecursionLimitExceeded) as ctx:
            demangle("_SM3FooD3bar" + "LA" * 1000 + "i" + "_" * 1000 + "uEO")
        self.assertEqual(ctx.exception.limit, 256)
        with self.assertRaises(RecursionLimitExceeded):
            demangle("_SM3FooD3bar" + "R" * 5000)
        with self.assertRaises(RecursionLimitExceeded):
            demangle("_SM3Foo" + "K" * 5000)
        with self.assertRaises(RecursionLimitExceeded):
            demangle("_SM3FooF3bar" + "PM3FooF3bar" * 500 + "O")
        self.assertEqual(demangle("_SM3FooD3bar" + "LA" * 50 + "i" + "_" * 50 + "uEO"), "Foo.bar(Int" + "[]" * 50 + "): Unit")
        with self.assertRaises(RecursionLimitExceeded):
            demangle("_SM3FooD3bar" + "LA" * 5 + "i" + "_" * 5 + "uEO", max_depth=8)

    def testInterpreterStackExhausted(self):
        # a limit beyond the interpreter stack still ends in a DemangleError
        with self.assertRaises(RecursionLimitExceeded) as ctx:
            demangle("_SM3FooD3bar" + "A" * 5000, max_depth=10**6)
        self.assertEqual(ctx.exception.production, "type-name")
        self.assertEqual(ctx.exception.token, "A")
        self.assertLess(ctx.exception.limit, 10**6)

    def testPurity(self):
        for mangled, _ in REFERENCE_SYMBOLS:
            self.assertEqual(demangle(mangled), demangle(mangled))
        errors = []
        for _ in range(2):
            try:
                demangle("_SM3FooD3barqEO")
            except DemangleError as exc:
                errors.append(exc)
        self.assertEqual(errors[0], errors[1])


if __name__ == "__main__":
    unittest.main()
