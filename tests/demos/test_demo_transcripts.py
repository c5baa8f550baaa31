"""Demo Transcripts: each driver reproduces the full console narrative line for line.

Tests cover:
    - strategy, command and abstract factory transcripts
    - The command demo leaves the order book empty after cancel
"""

from pattern_gallery.core.narration import Transcript
from pattern_gallery.demos import abstract_factory_demo, command_demo, strategy_demo


def test_strategy_demo_transcript():
    transcript = Transcript()
    strategy_demo.run(transcript)
    assert transcript.lines == [
        "Please read the code below, start with strategy example",
        "",
        "Client: Strategy is set to normal sorting.",
        "Context: Sorting data using the strategy (not sure how it'll do it)",
        "a,b,c,d,e",
        "",
        "Client: Strategy is set to reverse sorting.",
        "Context: Sorting data using the strategy (not sure how it'll do it)",
        "e,d,c,b,a",
        "Then continue with concrete strategy example",
        "Paid 100 using credit card.",
        "",
        "Paid 200 using PayPal.",
    ]


def test_command_demo_transcript():
    transcript = Transcript()
    command_demo.run(transcript)
    assert transcript.lines == [
        "Please read the code below, start with example",
        "",
        "Invoker: Does anybody want something done before I begin?",
        "SimpleCommand: See, I can do simple things like printing (Say Hi!)",
        "Invoker: ...doing something really important...",
        "Invoker: Does anybody want something done after I finish?",
        "ComplexCommand: Complex stuff should be done by a receiver object.",
        "Receiver: Working on (Send email.)",
        "Receiver: Also working on (Save report.)",
        "Then continue with concrete example",
        "You have successfully ordered Pad Thai (1234)",
        "Your order 1234 will arrive in 20 minutes.",
        "You have canceled your order 1234",
    ]


def test_command_demo_cancel_empties_book():
    manager = command_demo.concrete_example(Transcript())
    assert manager.orders == ()


def test_abstract_factory_demo_transcript():
    transcript = Transcript()
    abstract_factory_demo.run(transcript)
    assert transcript.lines == [
        "Please read the code below, start with abstract factory example",
        "",
        "Client: Testing client code with the first factory type...",
        "The result of the product B1.",
        "The result of the B1 collaborating with the (The result of the product A1.)",
        "",
        "Client: Testing the same client code with the second factory type...",
        "The result of the product B2.",
        "The result of the B2 collaborating with the (The result of the product A2.)",
        "Then continue with concrete factory example",
        "Clicked a dark button!",
        "Displaying a dark panel.",
    ]
