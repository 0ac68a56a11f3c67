"""
NLogo Model Document Format
===========================

Layout:
    <code section lines>         <- Code, written without a leading blank line
    @#$#@#$#@                    <- Separator
    <interface section lines>    <- Widgets, one block per widget, each followed by a blank line
    @#$#@#$#@
    <info section lines>         <- Markdown info text
    @#$#@#$#@
    <turtle shapes>
    @#$#@#$#@
    <version>                    <- Single line, e.g. "NetLogo 6.0.4"
    @#$#@#$#@
    ...                          <- Remaining sections, always 12 in total

Design Decisions:
    - Sections are positional: the order of SECTION_NAMES is the on-disk order
    - The separator is matched literally, never as a pattern
    - An empty section is written as a single line break
    - A non-empty section gets a leading blank line unless it already starts
      with one, or it is the code section
    - Sections without a codec are carried through verbatim
"""

from pathlib import Path

# Literal token written between sections
SEPARATOR = "@#$#@#$#@"

# Identifier prefix for every section name
SECTION_NAMESPACE = "org.nlogo.modelsection."

SECTION_CODE = SECTION_NAMESPACE + "code"
SECTION_INTERFACE = SECTION_NAMESPACE + "interface"
SECTION_INFO = SECTION_NAMESPACE + "info"
SECTION_TURTLE_SHAPES = SECTION_NAMESPACE + "turtleshapes"
SECTION_VERSION = SECTION_NAMESPACE + "version"
SECTION_PREVIEW_COMMANDS = SECTION_NAMESPACE + "previewcommands"
SECTION_SYSTEM_DYNAMICS = SECTION_NAMESPACE + "systemdynamics"
SECTION_BEHAVIOR_SPACE = SECTION_NAMESPACE + "behaviorspace"
SECTION_HUBNET_CLIENT = SECTION_NAMESPACE + "hubnetclient"
SECTION_LINK_SHAPES = SECTION_NAMESPACE + "linkshapes"
SECTION_MODEL_SETTINGS = SECTION_NAMESPACE + "modelsettings"
SECTION_DELTA_TICK = SECTION_NAMESPACE + "deltatick"

# On-disk order. Do not reorder: documents are read positionally.
SECTION_NAMES = (
    SECTION_CODE,
    SECTION_INTERFACE,
    SECTION_INFO,
    SECTION_TURTLE_SHAPES,
    SECTION_VERSION,
    SECTION_PREVIEW_COMMANDS,
    SECTION_SYSTEM_DYNAMICS,
    SECTION_BEHAVIOR_SPACE,
    SECTION_HUBNET_CLIENT,
    SECTION_LINK_SHAPES,
    SECTION_MODEL_SETTINGS,
    SECTION_DELTA_TICK,
)

SECTION_TYPES = {
    SECTION_CODE: "Model source code",
    SECTION_INTERFACE: "Interface widgets",
    SECTION_INFO: "Info tab (markdown)",
    SECTION_TURTLE_SHAPES: "Turtle (vector) shapes",
    SECTION_VERSION: "Version of the application that saved the model",
    SECTION_PREVIEW_COMMANDS: "Commands used to render the preview image",
    SECTION_SYSTEM_DYNAMICS: "System dynamics modeler diagram",
    SECTION_BEHAVIOR_SPACE: "BehaviorSpace experiments",
    SECTION_HUBNET_CLIENT: "HubNet client interface",
    SECTION_LINK_SHAPES: "Link shapes",
    SECTION_MODEL_SETTINGS: "Model settings",
    SECTION_DELTA_TICK: "DeltaTick data",
}

# Version written into new documents
CURRENT_VERSION = "NetLogo 6.0.4"

# Info written before this release used the plain-text layout
INFO_MARKDOWN_VERSION = "4.2pre2"

# File extension
EXTENSION = ".nlogo"

RESOURCES_PATH = Path(__file__).parent / "resources"
EMPTY_INFO_PATH = RESOURCES_PATH / "empty-info.md"
DEFAULT_SHAPES_PATH = RESOURCES_PATH / "default-shapes.txt"
DEFAULT_LINK_SHAPES_PATH = RESOURCES_PATH / "default-link-shapes.txt"
