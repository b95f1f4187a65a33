#
#   project      : EventMeta
#   file         : dom_events.py
#   file_relpath : src/eventmeta/events/dom_events.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Reserved platform event names.

Custom events should not reuse these names: a listener attached for the
custom event would also fire for the native one. Entries are lowercased so
lookups are case-insensitive.
"""

from __future__ import annotations

from typing import Final

DOM_EVENT_NAMES: Final[frozenset[str]] = frozenset(
    {
        "abort",
        "afterprint",
        "afterscriptexecute",
        "alerting",
        "animationcancel",
        "animationend",
        "animationiteration",
        "animationstart",
        "appinstalled",
        "audioend",
        "audioprocess",
        "audiostart",
        "auxclick",
        "beforeinstallprompt",
        "beforeprint",
        "beforescriptexecute",
        "beforeunload",
        "beginevent",
        "blur",
        "boundary",
        "broadcast",
        "busy",
        "callschanged",
        "canplay",
        "canplaythrough",
        "cardstatechange",
        "cfstatechange",
        "change",
        "chargingchange",
        "chargingtimechange",
        "checkboxstatechange",
        "checking",
        "click",
        "command",
        "commandupdate",
        "compassneedscalibration",
        "complete",
        "compositionend",
        "compositionstart",
        "compositionupdate",
        "connected",
        "connecting",
        "connectioninfoupdate",
        "contextmenu",
        "copy",
        "cut",
        "datachange",
        "dataerror",
        "dblclick",
        "delivered",
        "devicechange",
        "devicemotion",
        "deviceorientation",
        "dialing",
        "disabled",
        "dischargingtimechange",
        "disconnected",
        "disconnecting",
        "domcontentloaded",
        "dommenuitemactive",
        "dommenuiteminactive",
        "dommousescroll",
        "downloading",
        "drag",
        "dragend",
        "dragenter",
        "dragleave",
        "dragover",
        "dragstart",
        "drop",
        "durationchange",
        "emptied",
        "enabled",
        "end",
        "ended",
        "endevent",
        "error",
        "focus",
        "focusin",
        "focusout",
        "fullscreenchange",
        "fullscreenerror",
        "gamepadconnected",
        "gamepaddisconnected",
        "gotpointercapture",
        "hashchange",
        "held",
        "holding",
        "icccardlockerror",
        "iccinfochange",
        "incoming",
        "input",
        "invalid",
        "keydown",
        "keypress",
        "keyup",
        "languagechange",
        "levelchange",
        "load",
        "loadeddata",
        "loadedmetadata",
        "loadend",
        "loadstart",
        "localized",
        "lostpointercapture",
        "mark",
        "message",
        "messageerror",
        "mousedown",
        "mouseenter",
        "mouseleave",
        "mousemove",
        "mouseout",
        "mouseover",
        "mouseup",
        "mousewheel",
        "mozaudioavailable",
        "mozbrowseractivitydone",
        "mozbrowserasyncscroll",
        "mozbrowseraudioplaybackchange",
        "mozbrowsercaretstatechanged",
        "mozbrowserclose",
        "mozbrowsercontextmenu",
        "mozbrowserdocumentfirstpaint",
        "mozbrowsererror",
        "mozbrowserfindchange",
        "mozbrowserfirstpaint",
        "mozbrowsericonchange",
        "mozbrowserloadend",
        "mozbrowserloadstart",
        "mozbrowserlocationchange",
        "mozbrowsermanifestchange",
        "mozbrowsermetachange",
        "mozbrowseropensearch",
        "mozbrowseropentab",
        "mozbrowseropenwindow",
        "mozbrowserresize",
        "mozbrowserscroll",
        "mozbrowserscrollareachanged",
        "mozbrowserscrollviewchange",
        "mozbrowsersecuritychange",
        "mozbrowserselectionstatechanged",
        "mozbrowsershowmodalprompt",
        "mozbrowsertitlechange",
        "mozbrowserusernameandpasswordrequired",
        "mozbrowservisibilitychange",
        "mozgamepadbuttondown",
        "mozgamepadbuttonup",
        "mozmousepixelscroll",
        "mozorientation",
        "mozscrolledareachanged",
        "moztimechange",
        "mscontentzoom",
        "msmanipulationstatechanged",
        "mspointerhover",
        "nomatch",
        "notificationclick",
        "noupdate",
        "obsolete",
        "offline",
        "online",
        "orientationchange",
        "overflow",
        "pagehide",
        "pageshow",
        "paste",
        "pause",
        "play",
        "playing",
        "pointercancel",
        "pointerdown",
        "pointerenter",
        "pointerleave",
        "pointerlockchange",
        "pointerlockerror",
        "pointermove",
        "pointerout",
        "pointerover",
        "pointerup",
        "popstate",
        "popuphidden",
        "popuphiding",
        "popupshowing",
        "popupshown",
        "progress",
        "push",
        "pushsubscriptionchange",
        "radiostatechange",
        "ratechange",
        "readystatechange",
        "received",
        "repeatevent",
        "reset",
        "resize",
        "resourcetimingbufferfull",
        "result",
        "resume",
        "resuming",
        "scroll",
        "seeked",
        "seeking",
        "select",
        "selectionchange",
        "selectstart",
        "sent",
        "show",
        "slotchange",
        "smartcard-insert",
        "smartcard-remove",
        "soundend",
        "soundstart",
        "speechend",
        "speechstart",
        "stalled",
        "start",
        "statechange",
        "statuschange",
        "stkcommand",
        "stksessionend",
        "storage",
        "submit",
        "suspend",
        "svgabort",
        "svgerror",
        "svgload",
        "svgresize",
        "svgscroll",
        "svgunload",
        "svgzoom",
        "timeout",
        "timeupdate",
        "touchcancel",
        "touchend",
        "touchenter",
        "touchleave",
        "touchmove",
        "touchstart",
        "transitioncancel",
        "transitionend",
        "transitionrun",
        "transitionstart",
        "underflow",
        "unload",
        "updateready",
        "userproximity",
        "ussdreceived",
        "visibilitychange",
        "voicechange",
        "voiceschanged",
        "volumechange",
        "vrdisplayactivate",
        "vrdisplayblur",
        "vrdisplayconnect",
        "vrdisplaydeactivate",
        "vrdisplaydisconnect",
        "vrdisplayfocus",
        "vrdisplaypresentchange",
        "waiting",
        "wheel",
    }
)
