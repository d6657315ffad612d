"""FindSecBugs (SpotBugs) XML report parsing.

The report is a ``BugCollection`` with one ``BugInstance`` per issue::

    <BugInstance type="XML_DECODER" priority="1" category="SECURITY">
      <ShortMessage>It is not safe to use an XMLDecoder ...</ShortMessage>
      <Class classname="a.b.C">...</Class>
      <Method classname="a.b.C" name="update" signature="(ILa/b/Cmd;)V">
        <Message>In method a.b.C.update(int, Cmd)</Message>
      </Method>
      <SourceLine start="47" end="48" primary="true"/>
      <SourceLine start="52" end="52" role="SOURCE_LINE_ANOTHER_INSTANCE"/>
    </BugInstance>

Only ``SourceLine`` elements directly under ``BugInstance`` are the issue's
locations; the ones nested in ``Class``/``Method`` describe the enclosing
declaration.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from .base import LineRange, RawEntry, ReportParseError

_PRIMITIVES = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
    "V": "void",
}


def parse_report(xml_text: str) -> list[RawEntry]:
    if not xml_text or not xml_text.strip():
        raise ReportParseError("report is empty")

    try:
        root = fromstring(xml_text)
    except (ET.ParseError, DefusedXmlException) as e:
        raise ReportParseError(f"malformed XML: {e}") from e

    if root.tag != "BugCollection":
        raise ReportParseError(f"unexpected root element <{root.tag}>")

    return [_entry(bug) for bug in root.findall("BugInstance")]


def _entry(bug: ET.Element) -> RawEntry:
    return RawEntry(
        code=bug.get("type", ""),
        priority=bug.get("priority", ""),
        description=_text(bug.find("ShortMessage")),
        offender=_offender(bug),
        lines=_lines(bug),
    )


def _text(el: ET.Element | None) -> str:
    return (el.text or "").strip() if el is not None else ""


def _offender(bug: ET.Element) -> str:
    method = bug.find("Method")
    if method is not None:
        message = _text(method.find("Message"))
        if message:
            return message
        params = ", ".join(decode_parameters(method.get("signature", "")))
        return f"In method {method.get('classname', '')}.{method.get('name', '')}({params})"

    cls = bug.find("Class")
    if cls is not None:
        return f"In class {cls.get('classname', '')}"
    return ""


def _lines(bug: ET.Element) -> list[LineRange]:
    out: list[LineRange] = []
    for sl in bug.findall("SourceLine"):
        try:
            start = int(sl.get("start", ""))
        except ValueError:
            continue
        try:
            end = int(sl.get("end", ""))
        except ValueError:
            end = start
        out.append(LineRange(start, max(start, end)))
    return out


def decode_parameters(signature: str) -> list[str]:
    """Simple type names of a JVM method descriptor's parameters.

    ``(I[Ljava/lang/String;Lcom/x/Cmd;)V`` -> ``["int", "String[]", "Cmd"]``
    """
    if not signature.startswith("("):
        return []
    body = signature[1 : signature.find(")")] if ")" in signature else signature[1:]

    out: list[str] = []
    i = 0
    dims = 0
    while i < len(body):
        c = body[i]
        if c == "[":
            dims += 1
            i += 1
            continue
        if c == "L":
            end = body.find(";", i)
            if end == -1:
                break
            name = body[i + 1 : end].rsplit("/", 1)[-1].replace("$", ".")
            i = end + 1
        else:
            name = _PRIMITIVES.get(c, c)
            i += 1
        out.append(name + "[]" * dims)
        dims = 0
    return out
