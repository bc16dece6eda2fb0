"""Parsed tree -- generate from the parser's JSON output.

The parser runs elsewhere (typically in the JavaScript toolchain) and hands
over its tree as JSON. ``node_from_dict`` turns it into razorgen nodes.

Template:
    <ul>@for(var i = 0; i < model.items.length; i++){<li>@model.items[i]</li>}</ul>

Run:
    python app.py
"""

import json

from razorgen import GenerationConfig, generate, node_from_dict

PARSED = """
{
  "type": "VashProgram",
  "body": [
    {
      "type": "VashMarkup",
      "name": "ul",
      "attributes": [],
      "isVoid": false,
      "voidClosed": false,
      "values": [
        {
          "type": "VashBlock",
          "head": [{"type": "VashText", "value": "for(var i = 0; i < model.items.length; i++)"}],
          "values": [
            {
              "type": "VashMarkup",
              "name": "li",
              "attributes": [],
              "isVoid": false,
              "voidClosed": false,
              "values": [
                {
                  "type": "VashExpression",
                  "values": [
                    {"type": "VashText", "value": "model.items"},
                    {"type": "VashIndexExpression", "values": [{"type": "VashText", "value": "i"}]}
                  ]
                }
              ]
            }
          ],
          "tail": []
        }
      ]
    }
  ]
}
"""

# Compiler-wide settings, as the runtime would pass them
SETTINGS = {"htmlEscape": True, "helpersName": "html", "modelName": "model", "favorText": False}

tree = node_from_dict(json.loads(PARSED))
config = GenerationConfig.from_options(SETTINGS, simple=True)
output = generate(tree, config)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
