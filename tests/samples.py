"""Sample document content shared by the tests."""

from nlogofmt.spec import SEPARATOR

VIEW_LINES = [
    "GRAPHICS-WINDOW",
    "210", "10", "647", "448",
    "-1", "-1",
    "13.0",
    "1",
    "10",
    "1", "1", "1",
    "0",
    "1", "1", "1",
    "-16", "16", "-16", "16",
    "0", "0",
    "1",
    "ticks",
    "30.0",
]

BUTTON_LINES = [
    "BUTTON",
    "15", "10", "82", "43",
    "NIL",
    "setup",
    "NIL",
    "1",
    "T",
    "OBSERVER",
    "NIL", "NIL", "NIL", "NIL",
    "1",
]

LINK_SHAPE_LINES = [
    "default",
    "0.0",
    "-0.2 0 0.0 1.0",
    "0.0 1 1.0 0.0",
    "0.2 0 0.0 1.0",
    "link direction",
    "true",
    "0",
    "Line -7500403 true 150 150 90 180",
    "Line -7500403 true 150 150 210 180",
]


def build_document(code="to setup\n  clear-all\nend\n", version="NetLogo 6.0.4",
                   info="## WHAT IS IT?\n\nA test model.\n"):
    parts = [
        code,
        "\n" + "\n".join(VIEW_LINES) + "\n\n" + "\n".join(BUTTON_LINES) + "\n\n",
        "\n" + info,
        "\ndefault\ntrue\n0\nPolygon -7500403 true true 150 5 40 250 150 205 260 250\n\n",
        f"\n{version}\n",
        "\nsetup repeat 75 [ go ]\n",
        "\n",
        "\n",
        "\n",
        "\n" + "\n".join(LINK_SHAPE_LINES) + "\n\n",
        "\n",
        "\n",
    ]
    return SEPARATOR.join(parts)
